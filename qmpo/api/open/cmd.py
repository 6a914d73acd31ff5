"""Open API function.

Open the directory named by a directory:// URI in the platform file manager.
Matches CLI: qmpo open <uri>
"""

from collections.abc import Iterator

from .._output_schemas.uri import OpenOutput
from ..config.QmpoConfig import QmpoConfig
from ..log.log_event import log_event
from ..StageResult import StageResult
from ..uri.DirectoryUriError import DirectoryUriError
from ..uri.parse_directory_uri import parse_directory_uri
from .open_in_file_manager import open_in_file_manager
from .UnsupportedPlatformError import UnsupportedPlatformError


def cmd(uri: str) -> StageResult:
    """Open the path of a directory URI in the file manager.

    Rules:
        1. The URI must parse as a directory:// URI
        2. The path must exist on this machine
        3. The path is resolved (symlinks, ``..``) before it is handed to the file manager
        4. A file is shown selected inside its parent directory (opener.reveal_files)

    Returns:
        StageResult with open results
    """

    def _build_result(
        result_obj: StageResult,
        success: bool,
        message: str,
        native_path: str = "",
        resolved_path: str = "",
        is_file: bool = False,
        errors: list[str] | None = None,
        warnings: list[str] | None = None,
    ) -> None:
        result_obj.output = OpenOutput(
            errors=errors or [],
            warnings=warnings or [],
            uri=uri,
            native_path=native_path,
            resolved_path=resolved_path,
            is_file=is_file,
            opened=success,
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = success

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = QmpoConfig.load()
        except ValueError as e:
            _build_result(result_obj, success=False, message=str(e), errors=[str(e)])
            yield (1.0, "Complete")
            return

        log_event(config, "open", "INFO", f"Received URI: {uri}")

        yield (0.3, "Parsing URI...")
        try:
            directory_uri = parse_directory_uri(uri)
        except DirectoryUriError as e:
            log_event(config, "open", "ERROR", f"{e} ({uri})")
            _build_result(result_obj, success=False, message=f"Invalid URI: {e}", errors=[str(e)])
            yield (1.0, "Complete")
            return

        native_path = directory_uri.native_path
        path = directory_uri.into_path()

        yield (0.5, "Checking path exists...")
        if not path.exists():
            message = f"Path does not exist: {native_path}"
            log_event(config, "open", "ERROR", message)
            _build_result(result_obj, success=False, message=message, native_path=native_path, errors=[message])
            yield (1.0, "Complete")
            return

        yield (0.6, "Resolving path...")
        try:
            resolved = path.resolve(strict=True)
        except (OSError, RuntimeError) as e:
            message = f"Failed to resolve path {native_path}: {e}"
            log_event(config, "open", "ERROR", message)
            _build_result(result_obj, success=False, message=message, native_path=native_path, errors=[message])
            yield (1.0, "Complete")
            return

        is_file = resolved.is_file()

        yield (0.8, "Opening file manager...")
        try:
            command = open_in_file_manager(resolved, reveal_files=config.opener.reveal_files)
        except (UnsupportedPlatformError, OSError) as e:
            message = f"Failed to open file manager: {e}"
            log_event(config, "open", "ERROR", message)
            _build_result(
                result_obj,
                success=False,
                message=message,
                native_path=native_path,
                resolved_path=str(resolved),
                is_file=is_file,
                errors=[message],
            )
            yield (1.0, "Complete")
            return

        log_event(config, "open", "INFO", f"Opened {resolved} via {command[0]}")
        yield (1.0, "Complete")
        _build_result(
            result_obj,
            success=True,
            message=f"Opened {resolved}",
            native_path=native_path,
            resolved_path=str(resolved),
            is_file=is_file,
        )

    return StageResult(
        announce=f"Opening {uri}...",
        progress_callback=do_work,
    )
