import logging
import sys


class ContextFormatter(logging.Formatter):
    """Custom formatter that handles the optional entity field."""
    def format(self, record):
        if not hasattr(record, 'entity'):
            record.entity = '-'
        return super().format(record)


def configure_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(
        "%(asctime)s %(levelname)s %(name)s [entity=%(entity)s] - %(message)s"
    ))
    logging.basicConfig(
        level=level.upper(),
        handlers=[handler],
    )
