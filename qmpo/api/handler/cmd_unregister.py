"""Handler unregister command - remove the directory:// registration."""

from collections.abc import Iterator

from .._output_schemas.handler import HandlerUnregisterOutput
from ..config.QmpoConfig import QmpoConfig
from ..log.log_event import log_event
from ..StageResult import StageResult
from .Handler import Handler


def cmd_unregister() -> StageResult:
    """Unregister qmpo as the directory:// URI handler."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        platform_name = Handler.detect_os()

        yield (0.1, "Loading configuration...")
        try:
            config = QmpoConfig.load()
        except ValueError as e:
            config = None
            load_error = str(e)
        else:
            load_error = ""

        yield (0.5, "Removing URI scheme registration...")
        try:
            with Handler(platform_name) as handler:
                details = handler.unregister()
        except (RuntimeError, OSError) as e:
            if config is not None:
                log_event(config, "handler", "ERROR", f"Unregistration failed: {e}")
            result_obj.result = f"Error unregistering handler: {e}"
            result_obj.output = HandlerUnregisterOutput(
                errors=[str(e)],
                warnings=[load_error] if load_error else [],
                platform=platform_name,
                unregistered=False,
                details={},
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Complete")
            return

        if config is not None:
            log_event(config, "handler", "INFO", "Unregistered directory:// handler")
        yield (1.0, "Complete")
        result_obj.result = "Unregistered qmpo"
        result_obj.output = HandlerUnregisterOutput(
            errors=[],
            warnings=[load_error] if load_error else [],
            platform=platform_name,
            unregistered=True,
            details=details,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Unregistering directory:// handler...",
        progress_callback=do_work,
    )
