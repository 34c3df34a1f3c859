import subprocess
import tempfile
from pathlib import Path

from docmeta.conversion.base import BaseOfficeConverter, ensure_pdf
from docmeta.conversion.exceptions import ConversionError
from docmeta.logging.logger import Log


class LibreOfficeAdapter(BaseOfficeConverter):
    """Converts office documents with a local headless LibreOffice."""

    def __init__(self, *, binary: str = "soffice", timeout_seconds: int = 120) -> None:
        self._binary = binary
        self._timeout_seconds = timeout_seconds

    def convert(self, source_bytes: bytes, source_suffix: str = ".pptx") -> bytes:
        with tempfile.TemporaryDirectory(prefix="docmeta-convert-") as workdir:
            work = Path(workdir)
            source = work / f"source{source_suffix}"
            source.write_bytes(source_bytes)
            self._run(self._command(work, source))
            output = source.with_suffix(".pdf")
            if not output.exists():
                raise ConversionError("LibreOffice produced no PDF output")
            return ensure_pdf(output.read_bytes(), "LibreOffice")

    def _command(self, work: Path, source: Path) -> list[str]:
        # soffice locks its profile directory; each call gets its own.
        profile = (work / "profile").as_uri()
        return [
            self._binary,
            "--headless",
            "--norestore",
            f"-env:UserInstallation={profile}",
            "--convert-to",
            "pdf",
            "--outdir",
            str(work),
            str(source),
        ]

    def _run(self, command: list[str]) -> None:
        Log.debug(f"Running converter: {' '.join(command)}")
        try:
            subprocess.run(
                command,
                check=True,
                capture_output=True,
                timeout=self._timeout_seconds,
            )
        except FileNotFoundError as exc:
            raise ConversionError(f"LibreOffice binary not found: {self._binary}") from exc
        except subprocess.TimeoutExpired as exc:
            raise ConversionError(
                f"LibreOffice conversion timed out after {self._timeout_seconds}s"
            ) from exc
        except subprocess.CalledProcessError as exc:
            stderr = (exc.stderr or b"").decode("utf-8", errors="replace").strip()
            raise ConversionError(
                f"LibreOffice exited with status {exc.returncode}: {stderr}"
            ) from exc
