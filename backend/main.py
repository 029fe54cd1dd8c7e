import argparse
import uvicorn

from core.common.app_settings import settings
from core.common.log import configure_logger
from core.common.log import logger
from core.common.base import VERSION


def parse_args():
    parser = argparse.ArgumentParser()
    parser.add_argument("-port", type=int, help="listen port, defaults to PORT", default=None)
    parser.add_argument("-host", help="listen address, defaults to HOST", default=None)
    return parser.parse_known_args()[0]


def log_app_banner(port: int) -> None:
    logger.info(f"{settings.app_name} Web starting on port {port} (version {VERSION})")
    logger.info(f"API URL: {settings.api_url}")


if __name__ == "__main__":
    args = parse_args()
    configure_logger(level=settings.log_level, log_file=settings.log_file)
    port = args.port or settings.port
    log_app_banner(port)
    auto_reload = settings.auto_reload
    workers = settings.threads
    if auto_reload and workers > 1:
        logger.warning("AUTO_RELOAD=True requires a single worker, forcing workers=1")
        workers = 1

    run_kwargs = {
        "app": "web:app",
        "host": args.host or settings.host,
        "port": port,
        "workers": workers,
        "log_config": None,
    }
    if auto_reload:
        run_kwargs.update(
            {
                "reload": True,
                "reload_dirs": ["apis", "core", "schemas"],
            }
        )

    uvicorn.run(**run_kwargs)
