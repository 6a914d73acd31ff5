"""Handler status command - show the directory:// registration."""

from collections.abc import Iterator

from .._output_schemas.handler import HandlerStatusOutput
from ..StageResult import StageResult
from .Handler import Handler


def cmd_status() -> StageResult:
    """Show whether qmpo is the registered directory:// handler."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        platform_name = Handler.detect_os()

        yield (0.5, "Querying registration...")
        try:
            with Handler(platform_name) as handler:
                details = handler.status()
        except (RuntimeError, OSError) as e:
            result_obj.result = f"Error reading handler status: {e}"
            result_obj.output = HandlerStatusOutput(
                errors=[str(e)],
                warnings=[],
                platform=platform_name,
                registered=False,
                details={},
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Complete")
            return

        registered = bool(details.get("registered", False))
        yield (1.0, "Complete")
        result_obj.result = "Handler registered" if registered else "Handler not registered"
        result_obj.output = HandlerStatusOutput(
            errors=[],
            warnings=[],
            platform=platform_name,
            registered=registered,
            details=details,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Checking directory:// handler status...",
        progress_callback=do_work,
    )
