"""Real archive extractor using zipfile."""

import logging
import shutil
import zipfile
from pathlib import Path, PurePosixPath

from nexus_retriever.errors import ExtractionError, UnsafeArchiveEntryError
from nexus_retriever.gateway.archive.abc import ArchiveExtractor

logger = logging.getLogger(__name__)


def _member_target(archive_path: Path, destination_dir: Path, name: str) -> Path:
    """Map an archive member name to its path under destination_dir.

    Raises:
        UnsafeArchiveEntryError: If the member is absolute or resolves outside
            destination_dir
    """
    member = PurePosixPath(name.replace("\\", "/"))
    if member.is_absolute() or (member.parts and member.parts[0].endswith(":")):
        raise UnsafeArchiveEntryError(archive_path=archive_path, entry=name)

    target = (destination_dir / Path(*member.parts)).resolve() if member.parts else destination_dir
    if not target.is_relative_to(destination_dir):
        raise UnsafeArchiveEntryError(archive_path=archive_path, entry=name)
    return target


class RealArchiveExtractor(ArchiveExtractor):
    """Production implementation for zip archives.

    All members are validated before anything is written, so a rejected
    archive leaves the destination untouched. Unix permission bits recorded
    in the archive are restored on extracted files.
    """

    def extract(self, archive_path: Path, destination_dir: Path) -> list[Path]:
        root = destination_dir.resolve()
        try:
            with zipfile.ZipFile(archive_path) as archive:
                members = [
                    (info, _member_target(archive_path, root, info.filename))
                    for info in archive.infolist()
                ]

                root.mkdir(parents=True, exist_ok=True)
                written: list[Path] = []
                for info, target in members:
                    if info.is_dir():
                        target.mkdir(parents=True, exist_ok=True)
                    else:
                        target.parent.mkdir(parents=True, exist_ok=True)
                        with archive.open(info) as source, open(target, "wb") as sink:
                            shutil.copyfileobj(source, sink)
                        mode = (info.external_attr >> 16) & 0o777
                        if mode:
                            target.chmod(mode)
                    written.append(target)
        except zipfile.BadZipFile as e:
            msg = f"Archive {archive_path} is not a valid zip file: {e}"
            raise ExtractionError(msg) from e
        except OSError as e:
            msg = f"Failed to extract {archive_path} into {destination_dir}: {e}"
            raise ExtractionError(msg) from e

        logger.debug("Extracted %d entries from %s", len(written), archive_path)
        try:
            archive_path.unlink()
        except OSError as e:
            msg = f"Extracted {archive_path} but could not delete it: {e}"
            raise ExtractionError(msg) from e
        return written
