"""Compile pipeline that injects secret codes for the duration of a qmk build.

The generated header only holds real codes between ``arm`` and ``disarm``.
Once arming succeeded the placeholder is written back on every exit path,
including failures of the build or of the artifact copy.
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path

from qmkwrap.build.artifacts import artifact_filename, relocate_artifact
from qmkwrap.build.cipher import rotate
from qmkwrap.build.header import HeaderWriter
from qmkwrap.build.version import VersionResolver
from qmkwrap.config.models import CipherKeys, PipelineConfig
from qmkwrap.core.errors import (
    ArtifactIOError,
    ConfigError,
    ExternalBuildError,
    HeaderWriteError,
    ProcessError,
    QmkWrapError,
)
from qmkwrap.core.structlog_logger import get_struct_logger
from qmkwrap.models.build import BuildRequest, BuildResult
from qmkwrap.protocols import FileAdapterProtocol, ProcessAdapterProtocol


logger = get_struct_logger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S "
CRITICAL_PREFIX = "CRITICAL: failed to remove temporary codes"


class BuildOrchestrator:
    """Runs one compile request end to end.

    Args:
        config: Directories and header settings
        keys: Secret material for encoding codes
        file_adapter: Adapter for header and artifact I/O
        process_adapter: Adapter for git and qmk invocations
        clock: Returns the time used in the version label
        stdout_sink: Receives qmk's stdout lines as they are produced
        version_resolver: Override for the version query
    """

    def __init__(
        self,
        config: PipelineConfig,
        keys: CipherKeys,
        file_adapter: FileAdapterProtocol,
        process_adapter: ProcessAdapterProtocol,
        clock: Callable[[], datetime] = datetime.now,
        stdout_sink: Callable[[str], None] | None = None,
        version_resolver: VersionResolver | None = None,
    ):
        self.config = config
        self._keys = keys
        self.file_adapter = file_adapter
        self.process_adapter = process_adapter
        self.clock = clock
        self.stdout_sink = stdout_sink
        self.version_resolver = version_resolver or VersionResolver(process_adapter)

    def run(self, request: BuildRequest) -> BuildResult:
        """Execute the pipeline.

        Never raises for pipeline failures: the first failure is recorded as
        the result's primary error and a failed cleanup as a critical notice.
        """
        result = BuildResult(success=True)
        log = logger.bind(keyboard=request.keyboard, keymap=request.keymap)

        try:
            qmk_dir, output_dir = self._check_preconditions()
            self._execute(request, qmk_dir, output_dir, result)
        except QmkWrapError as e:
            result.error_kind = type(e).__name__
            result.add_error(str(e))
            log.info("build_failed", error_kind=result.error_kind, error=str(e))
        else:
            if result.success:
                log.info("build_succeeded", artifact=str(result.artifact_path))

        return result

    def _check_preconditions(self) -> tuple[Path, Path]:
        qmk_dir = self.config.qmk_dir
        output_dir = self.config.output_dir
        if not self.config.is_complete():
            missing = [
                name
                for name, value in (("qmk_dir", qmk_dir), ("output_dir", output_dir))
                if not value
            ]
            raise ConfigError(
                f"Directory values have not been set ({', '.join(missing)})"
            )
        return qmk_dir, output_dir

    def _execute(
        self,
        request: BuildRequest,
        qmk_dir: Path,
        output_dir: Path,
        result: BuildResult,
    ) -> None:
        version = self.version_resolver.resolve(qmk_dir)
        label = self.clock().strftime(TIMESTAMP_FORMAT) + version
        result.version_label = label

        code1, code2 = self.encode_codes(request)

        writer = HeaderWriter(
            self.file_adapter,
            self.config.header_path,
            self.config.macro_prefix,
        )
        with self.armed_header(writer, label, code1, code2, result):
            self._compile(request, qmk_dir, result)
            artifact = self._relocate(request, qmk_dir, output_dir)
            result.artifact_path = artifact

        result.add_message(f"Copied {artifact.name} to {output_dir}")

    def encode_codes(self, request: BuildRequest) -> tuple[str, str]:
        """Codes as they will appear in the header.

        With hashing enabled the stored key material is rotated using each code
        as the rotation key, so an empty code encodes to an empty string.
        """
        if not request.use_hash:
            return request.code1, request.code2
        return (
            rotate(self._keys.key1.get_secret_value(), request.code1, forward=True),
            rotate(self._keys.key2.get_secret_value(), request.code2, forward=True),
        )

    @contextmanager
    def armed_header(
        self,
        writer: HeaderWriter,
        label: str,
        code1: str,
        code2: str,
        result: BuildResult,
    ) -> Iterator[None]:
        """Keep real codes in the header for the duration of the block.

        A failed arm raises without touching the header again. After a
        successful arm, the disarm write runs exactly once however the block
        exits; its failure is recorded as a critical notice on ``result``.
        """
        try:
            writer.arm(label, code1, code2)
        except HeaderWriteError as e:
            raise HeaderWriteError(
                f"failed to write code file: {e}", context=e.context
            ) from e

        try:
            yield
        finally:
            try:
                writer.disarm()
            except HeaderWriteError as e:
                logger.critical("header_disarm_failed", path=str(writer.path))
                result.add_critical(f"{CRITICAL_PREFIX}: {e}")

    def _compile(self, request: BuildRequest, qmk_dir: Path, result: BuildResult) -> None:
        command = [
            "qmk",
            "compile",
            "--keyboard",
            request.keyboard,
            "--keymap",
            request.keymap,
        ]
        logger.info("qmk_compile_started", keyboard=request.keyboard)

        try:
            return_code, _stdout, stderr = self.process_adapter.run_streaming(
                command, cwd=qmk_dir, stdout_sink=self.stdout_sink
            )
        except ProcessError as e:
            raise ExternalBuildError(f"failed to run qmk compile: {e}") from e

        result.build_stderr = list(stderr)
        if return_code != 0:
            raise ExternalBuildError(
                f"failed to run qmk compile: exit code {return_code}",
                return_code=return_code,
            )

    def _relocate(self, request: BuildRequest, qmk_dir: Path, output_dir: Path) -> Path:
        filename = artifact_filename(request.keyboard, request.keymap, request.suffix)
        try:
            return relocate_artifact(self.file_adapter, filename, qmk_dir, output_dir)
        except ArtifactIOError as e:
            raise ArtifactIOError(
                f"failed to copy qmk files: {e}", context=e.context
            ) from e


def create_build_orchestrator(
    config: PipelineConfig,
    keys: CipherKeys | None = None,
    file_adapter: FileAdapterProtocol | None = None,
    process_adapter: ProcessAdapterProtocol | None = None,
    stdout_sink: Callable[[str], None] | None = None,
) -> BuildOrchestrator:
    """Create a BuildOrchestrator with default adapters.

    Keys default to the ``QMKWRAP_KEY1`` / ``QMKWRAP_KEY2`` environment variables.
    """
    from qmkwrap.adapters import create_file_adapter, create_process_adapter

    return BuildOrchestrator(
        config=config,
        keys=keys if keys is not None else CipherKeys(),
        file_adapter=file_adapter or create_file_adapter(),
        process_adapter=process_adapter or create_process_adapter(),
        stdout_sink=stdout_sink,
    )


__all__ = [
    "BuildOrchestrator",
    "CRITICAL_PREFIX",
    "TIMESTAMP_FORMAT",
    "create_build_orchestrator",
]
