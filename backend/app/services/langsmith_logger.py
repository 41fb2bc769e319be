"""LangSmith tracing for the extraction and generation steps, off unless configured."""
from typing import Callable, List
from shared.config import settings


def tracing_enabled() -> bool:
    # Requires both the switch and an API key
    return settings.langsmith_tracing and bool(settings.langsmith_api_key)


def trace_tags() -> List[str]:
    return [f"env:{settings.app_env}", f"language:{settings.question_language}"]


def traceable(name: str, run_type: str = "chain") -> Callable:
    """
    Decorate a pipeline step for LangSmith.

    Evaluated at import time: with tracing off, the function is returned
    unchanged.
    """
    if not tracing_enabled():
        def _wrap(func):
            return func
        return _wrap

    # Lazy import keeps langsmith an optional extra
    from langsmith import traceable as _traceable  # type: ignore
    return _traceable(
        name=name,
        run_type=run_type,
        project_name=settings.langsmith_project,
        tags=trace_tags(),
    )
