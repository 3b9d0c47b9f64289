"""Main module entrypoint for local runtime execution.

This module validates startup configuration, loads GA4 credentials and
launches the FastAPI service. Credential failures terminate the process
before the listening port is bound.
"""

import argparse
import logging

import uvicorn

from pageviews_api.bootstrap import bootstrap_create_application
from pageviews_api.config import (
    CredentialsLoadError,
    SettingsLoadError,
    config_configure_logging,
    config_load_settings,
)

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Run the API server with validated startup configuration.

    Args:
        argv: Optional argument list, defaults to `sys.argv[1:]`.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with status 1 when settings or credentials are invalid.
    """

    argument_parser = argparse.ArgumentParser(description="GA4 Pageviews API runtime entrypoint")
    argument_parser.add_argument("--host", dest="host", type=str, help="Optional bind host override")
    argument_parser.add_argument("--port", dest="port", type=int, help="Optional listening port override")
    parsed_arguments = argument_parser.parse_args(argv)

    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        config_configure_logging()
        logger.error("%s", error)
        raise SystemExit(1) from error

    config_configure_logging(settings.log_level)
    host = parsed_arguments.host or settings.host
    port = parsed_arguments.port or settings.port

    try:
        application = bootstrap_create_application(settings=settings)
    except CredentialsLoadError as error:
        logger.error("Error loading service account key file: %s", error)
        raise SystemExit(1) from error

    logger.info("GA4 Pageviews API is running on port %s (environment=%s)", port, settings.environment_name)
    logger.info("Service account: %s", settings.google_application_credentials)
    logger.info("Try accessing: http://localhost:%s/api/pageviews?ids=ID1,ID2,ID3", port)
    uvicorn.run(application, host=host, port=port)


if __name__ == "__main__":
    main()
