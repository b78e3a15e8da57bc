from fastapi import HTTPException

from ..exceptions import ConfigurationError, FetchError


def handle_error(error: Exception) -> HTTPException:
    """Map chartcanvas errors onto HTTP exceptions for the geometry service."""
    if isinstance(error, HTTPException):
        return error
    elif isinstance(error, ConfigurationError):
        return HTTPException(
            status_code=422,
            detail=str(error)
        )
    elif isinstance(error, FetchError):
        return HTTPException(
            status_code=502,
            detail={
                "message": str(error),
                "upstream_status": error.status,
                "url": error.url,
            }
        )
    else:
        return HTTPException(
            status_code=500,
            detail=f"Unexpected error: {str(error)}"
        )


async def handle_load_error(coro):
    """Await a loader coroutine, re-raising its failure as an HTTPException."""
    try:
        return await coro
    except HTTPException:
        raise
    except Exception as e:
        raise handle_error(e) from e
