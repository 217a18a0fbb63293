import requests
import structlog
from requests.adapters import HTTPAdapter

logger = structlog.get_logger('client')


def get_http_client(
    user_agent: str | None = None,
    pool_size: int = 1,
) -> requests.Session:
    """
    Returns a plain requests session with request logging.
    No retries and no cache: every failure surfaces to the caller.
    """
    session = requests.Session()
    if user_agent:
        session.headers.update({'User-Agent': user_agent})
    session.headers.update({'Accept': 'application/json'})

    def logging_hook(response, *args, **kwargs):
        logger.info(
            'HTTP Request',
            method=response.request.method,
            url=response.url,
            status=response.status_code,
            content_length=len(response.content) if response.content else 0,
            elapsed=f"{response.elapsed.total_seconds():.3f}s",
        )
    session.hooks['response'].append(logging_hook)

    adapter = HTTPAdapter(
        pool_connections=pool_size,
        pool_maxsize=pool_size,
        max_retries=0,
    )
    session.mount('https://', adapter)
    session.mount('http://', adapter)

    logger.debug('Initialized HTTP Client', user_agent=user_agent)

    return session
