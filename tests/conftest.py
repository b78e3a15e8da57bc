import pytest
import logging

from chartcanvas.charts import DateChart, HistogramChart
from chartcanvas.config import reset_settings

logger = logging.getLogger(__name__)

SOURCE_URL = "https://data.example.com/sales.tsv"

SALES_TSV = "日付\t売上\n2025-01-01\t100\n20250102\t200\n"

GROUPED_SALES_TSV = (
    "date\tstore\tsales\tvisitors\n"
    "2025-01-02\tA\t120\t30\n"
    "2025-01-01\tA\t100\t25\n"
    "2025-01-01\tB\t80\t20\n"
    "2025-01-02\tB\t90\tn/a\n"
    "2025-01-03\tC\t999\t99\n"
)

SCORES_TSV = "store\tscore\nx\t1\ny\t2\nx\t3\n"


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Make every test read settings from a clean environment."""
    for name in ("FETCH_TIMEOUT", "ALLOWED_SOURCE_HOSTS", "DEFAULT_NUMBER_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def date_chart():
    return DateChart(title="Sales")


@pytest.fixture
def histogram_chart():
    return HistogramChart()


@pytest.fixture
def source_url():
    return SOURCE_URL
