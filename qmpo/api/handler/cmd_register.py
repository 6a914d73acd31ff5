"""Handler register command - bind directory:// URIs to qmpo."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.handler import HandlerRegisterOutput
from ..config.QmpoConfig import QmpoConfig
from ..log.log_event import log_event
from ..StageResult import StageResult
from .find_qmpo_executable import find_qmpo_executable
from .Handler import Handler


def cmd_register(path: Path | None = None) -> StageResult:
    """Register qmpo as the directory:// URI handler for the current user.

    Args:
        path: Path to the qmpo executable (auto-detected if not given)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        platform_name = Handler.detect_os()

        def _fail(message: str, executable: str = "") -> None:
            result_obj.result = f"Error registering handler: {message}"
            result_obj.output = HandlerRegisterOutput(
                errors=[message],
                warnings=[],
                platform=platform_name,
                executable=executable,
                registered=False,
                details={},
            ).model_dump(mode="python")
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = QmpoConfig.load()
        except ValueError as e:
            _fail(str(e))
            yield (1.0, "Complete")
            return

        yield (0.3, "Locating qmpo executable...")
        try:
            executable = find_qmpo_executable(path)
        except FileNotFoundError as e:
            _fail(str(e))
            yield (1.0, "Complete")
            return

        yield (0.6, "Registering URI scheme...")
        try:
            with Handler(platform_name) as handler:
                details = handler.register(executable)
        except (RuntimeError, ValueError, OSError) as e:
            log_event(config, "handler", "ERROR", f"Registration failed: {e}")
            _fail(str(e), str(executable))
            yield (1.0, "Complete")
            return

        log_event(config, "handler", "INFO", f"Registered {executable} as directory:// handler")
        yield (1.0, "Complete")
        result_obj.result = f"Registered qmpo as handler for directory:// URIs ({executable})"
        result_obj.output = HandlerRegisterOutput(
            errors=[],
            warnings=[],
            platform=platform_name,
            executable=str(executable),
            registered=True,
            details=details,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Registering directory:// handler...",
        progress_callback=do_work,
    )
