"""Structured logging with trace_id and recommendation/tool-call events."""
import logging
import sys
from contextvars import ContextVar
from typing import Any

import structlog

# Context variable for trace_id so it is attached to every log in the current request
trace_id_ctx: ContextVar[str | None] = ContextVar("trace_id", default=None)

# Prompts are user text; keep log lines bounded.
PROMPT_LOG_LIMIT = 200


def get_trace_id() -> str | None:
    return trace_id_ctx.get()


def set_trace_id(trace_id: str) -> None:
    trace_id_ctx.set(trace_id)


def clear_trace_id() -> None:
    trace_id_ctx.set(None)


def add_trace_id(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor: add trace_id to every event."""
    tid = get_trace_id()
    if tid:
        event_dict["trace_id"] = tid
    return event_dict


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structlog and stdlib logging. Call once at startup.

    Logs go to stderr so stdout stays clean for JSON results.
    """
    level = getattr(logging, log_level, logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_trace_id,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=True)
            if log_level == "DEBUG"
            else structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def _truncate(text: str) -> str:
    return text[:PROMPT_LOG_LIMIT] + "..." if len(text) > PROMPT_LOG_LIMIT else text


def log_skills_recommended(
    logger: structlog.stdlib.BoundLogger,
    prompt: str,
    skill_names: list[str],
) -> None:
    logger.info(
        "skills_recommended",
        prompt=_truncate(prompt),
        skill_names=skill_names,
        count=len(skill_names),
    )


def log_skills_listed(
    logger: structlog.stdlib.BoundLogger,
    min_priority: float | None,
    max_priority: float | None,
    total: int,
) -> None:
    logger.info(
        "skills_listed",
        min_priority=min_priority,
        max_priority=max_priority,
        total=total,
    )


def log_tool_call_start(
    logger: structlog.stdlib.BoundLogger,
    tool_name: str,
    arguments: dict[str, Any],
) -> None:
    logger.info("tool_call_start", tool_name=tool_name, arguments=arguments)


def log_tool_call_end(
    logger: structlog.stdlib.BoundLogger,
    tool_name: str,
    success: bool,
    result_summary: str | None = None,
    error: str | None = None,
) -> None:
    logger.info(
        "tool_call_end",
        tool_name=tool_name,
        success=success,
        result_summary=result_summary,
        error=error,
    )
