import sys
import logging

import structlog
import stackprinter


# event dict keys whose values must never be rendered
SENSITIVE_KEYS = frozenset([
    "api_key",
    "secret_key",
    "passphrase",
    "ok-access-key",
    "ok-access-sign",
    "ok-access-passphrase",
    "headers",
])

REDACTED = "<REDACTED>"

# frame variables stackprinter must not print in tracebacks
SUPPRESSED_VARS = [
    r".*api_key.*",
    r".*secret.*",
    r".*passphrase.*",
    r".*cred.*",
    r".*headers.*",
    r".*config.*",
]


def redact_credentials(logger, method_name, event_dict):
    """structlog processor, masks credential values before rendering"""
    for key in list(event_dict):
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = REDACTED
    return event_dict


def get_logger(name: str, level=logging.INFO, exception_style: str = "darkbg2"):
    stackprinter.set_excepthook(style=exception_style, suppressed_vars=SUPPRESSED_VARS)

    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            redact_credentials,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M.%S"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s\n\r:%(filename)s:%(funcName)s:line%(lineno)s",
        stream=sys.stdout,
        level=level,
    )

    root_logger = structlog.get_logger(name)
    return root_logger


def log_exception(logger: object, msg: Exception):
    stack = stackprinter.format(msg, style="darkbg2", suppressed_vars=SUPPRESSED_VARS)
    logger.error(stack)
