"""Parse command - report the native path of a directory URI without touching the disk."""

from collections.abc import Iterator

from .._output_schemas.uri import ParseOutput
from ..StageResult import StageResult
from .DirectoryUriError import DirectoryUriError
from .parse_directory_uri import parse_directory_uri


def cmd_parse(uri: str) -> StageResult:
    """Parse a directory URI and report its native path and shape."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Parsing URI...")
        try:
            directory_uri = parse_directory_uri(uri)
        except DirectoryUriError as e:
            result_obj.result = f"Invalid URI: {e}"
            result_obj.output = ParseOutput(
                errors=[str(e)],
                warnings=[],
                uri=uri,
                native_path="",
                shape="",
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Complete")
            return

        result_obj.result = f"Parsed {directory_uri.shape.value} path: {directory_uri.native_path}"
        result_obj.output = ParseOutput(
            errors=[],
            warnings=[],
            uri=uri,
            native_path=directory_uri.native_path,
            shape=directory_uri.shape.value,
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Parsing {uri}...",
        progress_callback=do_work,
    )
