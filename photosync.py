#!/usr/bin/env python

r"""
photosync.py - Copy a photo library into a date structured tree

SUMMARY:
--------
This script walks a source photo/video library (recursively), works out when each file
was captured (preferably from embedded metadata, falling back to the file system), and
copies it into a destination tree laid out as YYYY/MM-MonthName/DD-WeekdayName.
Files that already exist at the destination are detected and skipped, so the same
library can be synced again and again into the same destination.

FEATURES:
---------
- Capture date taken from embedded metadata (hachoir), then the embedded last
  modification date, then the file system creation time.
- Dates before 2000-01-01 are treated as unreliable; such files are copied into a
  folder named after their parent folder in the source tree.
- Duplicate detection by size and capture date; name clashes with different files
  are resolved by adding _1, _2, ... before the extension.
- Hidden files, hidden folders and zero byte files are never copied.
- Symbolic links are followed by default, with loop detection.
- Dry run mode: simulate actions without making changes.
- Logging to events.log in the destination directory; errors also go to stderr.

USAGE EXAMPLES:
---------------
1. Copy a library into an archive drive:
    python photosync.py /Volumes/Photos/Masters /Volumes/Archive/Photos

2. Preview what would be copied without touching the destination:
    python photosync.py -d /Volumes/Photos/Masters /Volumes/Archive/Photos

3. Do not follow symbolic links, verbose logging enabled:
    python photosync.py -L -v Z:\\photos target/

4. Re-run against the same destination; files already present are skipped:
    python photosync.py Z:\\photos target/

See --help for all options.
"""

# Standard library imports
import sys
import datetime
import logging
import shutil
import argparse
import stat
import time
from collections import namedtuple
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path
import os

# Third-party library imports for metadata extraction
from hachoir.parser import createParser
from hachoir.metadata import extractMetadata
from hachoir.core import config

# Suppress hachoir warnings to keep console output clean
config.quiet = True

# Version History:
# v1.0.0 - Date structured copy with size/capture date duplicate detection
# v1.1.0 - Iterative rename probing with an attempt limit
#          Hidden and symlinked folders only skip their own subtree
# v1.2.0 - Dry run mode, events.log in the destination directory
__version__ = "1.2.0"
myversion = f"v. {__version__} 2026-10-19"

# Dates before this are assumed to come from a bad clock or a file system that
# does not keep creation times (network shares in particular)
SANITY_CUTOFF = datetime.datetime(2000, 1, 1)

# Upper bound for the _N suffixes tried for a single file
MAX_RENAME_ATTEMPTS = 9999

# Log a progress line every PROGRESS_INTERVAL visited files
PROGRESS_INTERVAL = 100

# Used when an undated file sits directly in a source root without a name
FALLBACK_FOLDER = "undated"

# Fixed English names so folder names do not depend on the locale
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)

# Traversal event kinds produced by walk_tree()
EVENT_DIRECTORY = "directory"
EVENT_FILE = "file"
EVENT_ERROR = "error"


class PhotoSyncError(Exception):
    """Base error for photosync."""


class MetadataDecodeError(PhotoSyncError):
    """Embedded metadata could not be read (corrupt or non-media file)."""


class TraversalCycleError(PhotoSyncError, OSError):
    """A followed symbolic link leads back to one of its own ancestors."""


class ConflictResolutionExhausted(PhotoSyncError):
    """No free name was found within MAX_RENAME_ATTEMPTS."""


EmbeddedDates = namedtuple("EmbeddedDates", ["capture", "modified"])


@dataclass(frozen=True)
class FileRecord:
    path: Path
    size: int
    hidden: bool
    creation_date: datetime.datetime
    capture_date: Optional[datetime.datetime] = None
    modified_date: Optional[datetime.datetime] = None
    parse_error: bool = False


@dataclass(frozen=True)
class ConflictDecision:
    target_path: Path
    duplicate: bool


@dataclass
class RunStatistics:
    files_visited: int = 0
    files_copied: int = 0
    files_duplicate: int = 0
    files_failed: int = 0


@dataclass
class DryRunPlan:
    """Folders and files a dry run would have created so far."""

    folders: set = field(default_factory=set)
    files: dict = field(default_factory=dict)


class TreeEvent:
    """
    A single step of the source tree traversal.

    For EVENT_DIRECTORY events the consumer may set ``descend`` to False to
    skip the directory's contents (siblings are still visited).
    """

    __slots__ = ("kind", "path", "stat", "error", "descend")

    def __init__(self, kind, path, st=None, error=None):
        self.kind = kind
        self.path = path
        self.stat = st
        self.error = error
        self.descend = True

    def __repr__(self):
        return f"TreeEvent({self.kind!r}, {str(self.path)!r})"


def set_up_logging(destination_dir: Path, verbose: bool):
    """
    Set up logging to a file in the destination directory.

    Args:
        destination_dir (Path): Directory where log file will be created
        verbose (bool): Whether to enable verbose (DEBUG) logging

    Returns:
        logging.Logger: Configured logger instance

    Everything goes to 'events.log' in the destination directory. Warnings and
    errors are also written to stderr so per-file problems are visible on the
    console.
    """
    logger = logging.getLogger(__name__)

    # Set logging level based on verbose flag
    level = logging.DEBUG if verbose else logging.INFO

    logfile = destination_dir / "events.log"

    # Ensure the log directory exists
    try:
        logfile.parent.mkdir(parents=True, exist_ok=True)
    except Exception as e:
        print(f"Failed to create log directory: {e}", file=sys.stderr)
        sys.exit(1)

    logger.setLevel(level)

    # Add the handlers only once, main() may be called repeatedly in-process
    if not logger.handlers:
        fh = logging.FileHandler(logfile, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(fh)

        eh = logging.StreamHandler(sys.stderr)
        eh.setLevel(logging.WARNING)
        eh.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(eh)

    return logger


def close_logging(logger):
    """Flush and detach the handlers added by set_up_logging()."""
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def _as_datetime(value):
    """Normalize a hachoir date value to a naive datetime, or None."""
    if isinstance(value, datetime.datetime):
        # Keep the wall clock time, the rest of the tool works on naive dates
        return value.replace(tzinfo=None)
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time())
    return None


def _first_value(metadata, *keys):
    for key in keys:
        try:
            values = metadata.getValues(key)
        except (LookupError, ValueError):
            continue
        for value in values:
            dt = _as_datetime(value)
            if dt is not None:
                return dt
    return None


def decode_embedded_dates(filename: Path) -> EmbeddedDates:
    """
    Read the capture and last modification dates embedded in a media file.

    Args:
        filename (Path): Path to the file to extract metadata from

    Returns:
        EmbeddedDates: (capture, modified), either may be None

    Raises:
        MetadataDecodeError: if hachoir cannot parse the file at all

    The capture date is EXIF DateTimeOriginal when present, otherwise the
    generic hachoir 'creation_date' (EXIF DateTime, MP4/MOV creation time).
    """
    try:
        parser = createParser(str(filename))
    except Exception as e:
        raise MetadataDecodeError(f"Failed to create parser: {e}") from e

    if not parser:
        raise MetadataDecodeError("Unable to parse file")

    with parser:  # Ensure parser is properly closed
        try:
            metadata = extractMetadata(parser)
        except Exception as e:
            raise MetadataDecodeError(f"Metadata extraction error: {e}") from e

    if not metadata:
        raise MetadataDecodeError("Unable to extract metadata")

    return EmbeddedDates(
        capture=_first_value(metadata, "date_time_original", "creation_date"),
        modified=_first_value(metadata, "last_modification"),
    )


def is_hidden(path: Path, st=None) -> bool:
    """Dot files, plus files carrying the hidden attribute on Windows."""
    if path.name.startswith("."):
        return True
    attributes = getattr(st, "st_file_attributes", 0)
    return bool(attributes & getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0))


def file_creation_time(st) -> datetime.datetime:
    """
    Creation time from a stat result.

    Platforms without a birth time get the modification time, which is what
    those file systems report as "creation" anyway.
    """
    timestamp = getattr(st, "st_birthtime", None)
    if timestamp is None:
        timestamp = st.st_mtime
    return datetime.datetime.fromtimestamp(timestamp)


def extract_file_record(path: Path, st, logger, decoder=decode_embedded_dates) -> FileRecord:
    """
    Build the FileRecord for a file from its stat result and embedded metadata.

    Args:
        path (Path): File to describe
        st (os.stat_result): Attributes of the file
        logger (logging.Logger): Logger for recording issues
        decoder (callable): Returns EmbeddedDates for a path, raises
            MetadataDecodeError when the file cannot be decoded

    Returns:
        FileRecord: Never raises for undecodable files; the dates are just absent
    """
    hidden = is_hidden(path, st)
    capture = modified = None
    parse_error = False

    # Hidden files are never copied, don't bother decoding them
    if not hidden:
        try:
            dates = decoder(path)
        except MetadataDecodeError as e:
            logger.warning(f"Error parsing file: {path} - {e}")
            parse_error = True
        else:
            capture = _as_datetime(dates.capture)
            if capture is None:
                logger.debug(f"No capture date in metadata: {path}")
                # The embedded modification date only matters without a capture date
                modified = _as_datetime(dates.modified)

    return FileRecord(
        path=path,
        size=st.st_size,
        hidden=hidden,
        creation_date=file_creation_time(st),
        capture_date=capture,
        modified_date=modified,
        parse_error=parse_error,
    )


def resolve_target_subpath(record: FileRecord, relative_path: Path, root_name: str = "") -> str:
    """
    Work out the destination folder (relative to the destination root) for a file.

    Args:
        record (FileRecord): Metadata of the source file
        relative_path (Path): File path relative to the source root
        root_name (str): Name of the source root, used for undated files that
            sit directly in it

    Returns:
        str: 'YYYY/MM-MonthName/DD-WeekdayName', or the name of the file's
        parent folder when no trustworthy date is available

    Example:
        2021-06-01 10:00 -> '2021/06-June/01-Tuesday'
    """
    date = record.capture_date or record.modified_date or record.creation_date

    if date < SANITY_CUTOFF:
        parent = Path(relative_path).parent.name
        return parent or root_name or FALLBACK_FOLDER

    return (
        f"{date.year:04d}"
        f"/{date.month:02d}-{MONTH_NAMES[date.month - 1]}"
        f"/{date.day:02d}-{WEEKDAY_NAMES[date.weekday()]}"
    )


def numbered_filename(filename: str, count: int) -> str:
    """
    Insert a _<count> suffix before the extension.

    Examples:
        IMG_0001.jpg -> IMG_0001_1.jpg
        archive.tar.gz -> archive.tar_1.gz
        README -> README_1
    """
    i = filename.rfind(".")
    if i <= 0:
        return f"{filename}_{count}"
    return f"{filename[:i]}_{count}{filename[i:]}"


def is_same_file(existing: FileRecord, source: FileRecord) -> bool:
    # Creation times are unreliable across file systems, so they are never compared.
    # Without a capture date on the existing file only the size is compared, which
    # can mistake two different files of equal size for the same one.
    if existing.capture_date is not None:
        return existing.size == source.size and existing.capture_date == source.capture_date
    return existing.size == source.size


def resolve_conflict(record: FileRecord, target_dir: Path, logger, decoder=decode_embedded_dates, planned=None) -> ConflictDecision:
    """
    Pick the destination path for a file and decide whether it is already there.

    Args:
        record (FileRecord): Metadata of the source file
        target_dir (Path): Destination folder for the file
        logger (logging.Logger): Logger for recording operations
        decoder (callable): Metadata decoder used for the existing files
        planned (dict, optional): Target path -> FileRecord of copies a dry
            run has already planned; they count as existing files

    Returns:
        ConflictDecision: duplicate=True if an identical file already exists
        at target_path, otherwise target_path is free to copy to

    Raises:
        ConflictResolutionExhausted: if MAX_RENAME_ATTEMPTS names are all taken
        OSError: if an existing destination file cannot be examined
    """
    filename = record.path.name
    candidate = target_dir / filename

    planned = planned or {}

    for count in range(1, MAX_RENAME_ATTEMPTS + 1):
        existing = planned.get(candidate)
        if existing is None:
            if not os.path.lexists(candidate):
                return ConflictDecision(candidate, duplicate=False)

            existing = extract_file_record(
                candidate, os.stat(candidate, follow_symlinks=False), logger, decoder
            )
        if is_same_file(existing, record):
            logger.debug(f"  DUPLICATE: {record.path} already exists as {candidate}")
            return ConflictDecision(candidate, duplicate=True)

        logger.debug(f"  NAME CONFLICT: {candidate} holds a different file")
        candidate = target_dir / numbered_filename(filename, count)

    raise ConflictResolutionExhausted(
        f"Too many files named like {filename} in {target_dir}"
    )


def walk_tree(source_dir: Path, follow_symlinks: bool = True):
    """
    Depth-first traversal of a directory tree.

    Args:
        source_dir (Path): Root of the tree
        follow_symlinks (bool): Descend into symlinked directories

    Yields:
        TreeEvent: EVENT_DIRECTORY before a directory's contents are listed
        (set ``event.descend = False`` to skip them), EVENT_FILE for every
        other entry, EVENT_ERROR for paths that could not be read or that
        close a symlink loop.

    The root itself is listed without a directory event.
    """
    try:
        root_stat = os.stat(source_dir)
    except OSError as e:
        yield TreeEvent(EVENT_ERROR, source_dir, error=e)
        return

    # Each stack entry carries the (st_dev, st_ino) of the directory and its
    # ancestors, so a followed link that points back up the tree is caught
    stack = [(source_dir, frozenset([(root_stat.st_dev, root_stat.st_ino)]))]

    while stack:
        directory, ancestors = stack.pop()
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            yield TreeEvent(EVENT_ERROR, directory, error=e)
            continue

        subdirs = []
        for entry in entries:
            path = Path(entry.path)
            try:
                # Symlinked folders always show up as folders, the consumer decides
                is_dir = entry.is_dir()
                st = entry.stat(follow_symlinks=follow_symlinks)
            except OSError as e:
                yield TreeEvent(EVENT_ERROR, path, error=e)
                continue

            if not is_dir:
                yield TreeEvent(EVENT_FILE, path, st)
                continue

            key = (st.st_dev, st.st_ino)
            if key in ancestors:
                yield TreeEvent(EVENT_ERROR, path, error=TraversalCycleError(f"Cycle detected: {path}"))
                continue

            event = TreeEvent(EVENT_DIRECTORY, path, st)
            yield event
            if event.descend:
                subdirs.append((path, ancestors | {key}))

        # Reversed so the stack pops them in name order
        stack.extend(reversed(subdirs))


def copy_file(record: FileRecord, target_dir: Path, stats: RunStatistics, logger, plan=None, decoder=decode_embedded_dates):
    """
    Copy one file into its destination folder unless it is already there.

    Args:
        plan (DryRunPlan, optional): Set for a dry run; nothing is written and
            the planned folders and copies are recorded instead

    Returns:
        int: 1 if the file was copied, 0 otherwise. Duplicates and failures
        are counted in stats.
    """
    dryrun = plan is not None
    try:
        if not target_dir.exists() and not (dryrun and target_dir in plan.folders):
            if dryrun:
                plan.folders.add(target_dir)
            else:
                target_dir.mkdir(parents=True, exist_ok=True)
            logger.info(f"created new destination subdir: {target_dir}" + (" [DRY RUN]" if dryrun else ""))

        decision = resolve_conflict(
            record, target_dir, logger, decoder, plan.files if dryrun else None
        )
    except (OSError, ValueError, OverflowError, ConflictResolutionExhausted) as e:
        logger.error(f"Unable to copy: {record.path}: {e}")
        stats.files_failed += 1
        return 0

    if decision.duplicate:
        stats.files_duplicate += 1
        logger.info(f"  {record.path.name}  skipped - already at {decision.target_path}")
        return 0

    try:
        if dryrun:
            plan.files[decision.target_path] = record
        else:
            shutil.copy2(str(record.path), str(decision.target_path))
    except OSError as e:
        logger.error(f"Unable to copy: {record.path}: {e}")
        stats.files_failed += 1
        return 0

    renamed = "" if decision.target_path.name == record.path.name else " [RENAMED]"
    logger.info(
        f"  {record.path.name}  copied -> {decision.target_path}{renamed}"
        + (" [DRY RUN]" if dryrun else "")
    )
    return 1


def recursive_walk(
    source_dir: Path,
    destination_dir: Path,
    logger,
    follow_symlinks=True,
    dryrun=False,
    decoder=decode_embedded_dates,
) -> RunStatistics:
    """
    Walk the source tree and copy every eligible file into the destination tree.

    Args:
        source_dir (Path): Source directory to scan
        destination_dir (Path): Root of the date structured destination tree
        logger (logging.Logger): Logger for recording operations
        follow_symlinks (bool): Follow symbolic links to files and folders
        dryrun (bool): Whether to simulate operations without making changes
        decoder (callable): Embedded metadata decoder, see extract_file_record()

    Returns:
        RunStatistics: Counters for this run

    Failures are per path: they are logged and the walk carries on.
    """
    stats = RunStatistics()
    plan = DryRunPlan() if dryrun else None

    for event in walk_tree(source_dir, follow_symlinks):
        if event.kind == EVENT_ERROR:
            if isinstance(event.error, TraversalCycleError):
                logger.error(f"cycle detected: {event.path}")
            else:
                logger.error(f"Unable to read: {event.path}: {event.error}")
            continue

        if event.kind == EVENT_DIRECTORY:
            if is_hidden(event.path, event.stat):
                logger.debug(f"Skipping hidden folder: {event.path}")
                event.descend = False
            elif not follow_symlinks and stat.S_ISLNK(event.stat.st_mode):
                logger.debug(f"Skipping symlinked folder: {event.path}")
                event.descend = False
            else:
                logger.info(f"Source Folder: {event.path}")
            continue

        stats.files_visited += 1
        if stats.files_visited % PROGRESS_INTERVAL == 0:
            logger.info(f"Processed {stats.files_visited} files so far...")

        path = event.path
        st = event.stat

        if not stat.S_ISREG(st.st_mode):
            # Only left over when links are not followed, or for sockets/devices
            logger.debug(f"Skipping non regular file: {path}")
            continue

        if st.st_size == 0:
            logger.info(f"Zero size file: {path}")
            continue

        if is_hidden(path, st):
            logger.debug(f"Skipping hidden file: {path}")
            continue

        # Out of range or pre-epoch timestamps fail here on some platforms
        try:
            record = extract_file_record(path, st, logger, decoder)
            subpath = resolve_target_subpath(record, path.relative_to(source_dir), source_dir.name)
        except (OSError, ValueError, OverflowError) as e:
            logger.error(f"Unable to read: {path}: {e}")
            stats.files_failed += 1
            continue

        stats.files_copied += copy_file(record, destination_dir / subpath, stats, logger, plan, decoder)

    logger.info(
        f"Total files visited: {stats.files_visited}, copied: {stats.files_copied}, "
        f"already present: {stats.files_duplicate}, failed: {stats.files_failed}"
    )
    return stats


def validate_args(source_dir: Path, destination_dir: Path):
    """
    Validate the source and destination directories.

    Exits:
        With status 1 if the source is not a directory, or if the destination
        is the source or lies inside it.

    Runs before logging is set up, so nothing is created on failure.
    """
    if not source_dir.exists() or not source_dir.is_dir():
        print(f"Source directory does not exist: {source_dir}", file=sys.stderr)
        sys.exit(1)

    if destination_dir.exists() and not destination_dir.is_dir():
        print(f"Destination is not a directory: {destination_dir}", file=sys.stderr)
        sys.exit(1)

    if source_dir == destination_dir:
        print("Source and destination directories must not be the same.", file=sys.stderr)
        sys.exit(1)

    # Copying into a subfolder of the source would walk its own output
    if source_dir in destination_dir.parents:
        print("Destination cannot be inside source folder.", file=sys.stderr)
        sys.exit(1)


def print_examples():
    """Print the examples section of the module docstring."""
    doc_lines = __doc__.split("\n")
    examples_start = doc_lines.index("USAGE EXAMPLES:")
    examples_end = next(
        (
            i
            for i, line in enumerate(doc_lines[examples_start:], examples_start)
            if line.startswith("See --help")
        ),
        len(doc_lines),
    )

    print("\n".join(doc_lines[examples_start : examples_end + 1]))


class VersionedArgumentParser(argparse.ArgumentParser):
    """Custom ArgumentParser that displays version on error when no arguments provided."""

    def error(self, message):
        # Check if this is a "required arguments" error with no args provided
        if "required" in message and len(sys.argv) == 1:
            sys.stderr.write(f"photosync {myversion}\n\n")
        self.print_usage(sys.stderr)
        sys.stderr.write(f"{self.prog}: error: {message}\n")
        sys.stderr.write(f"Try '{self.prog} --help' for more information.\n")
        sys.exit(2)


def parse_arguments(args=None):
    """
    Parse command line arguments using argparse.

    Args:
        args (list, optional): Command line arguments. Defaults to None.

    Returns:
        argparse.Namespace: Parsed arguments
    """
    if args is None:
        args = sys.argv[1:]

    # --examples works without the positional arguments
    if "--examples" in args:
        print_examples()
        sys.exit(0)

    parser = VersionedArgumentParser(
        prog="photosync",
        description="Copy photos and videos into a date structured tree (YYYY/MM-MonthName/DD-WeekdayName). Dates come from embedded metadata when available, otherwise from the file system. Files already present at the destination are skipped, so repeated runs only copy what is new.",
        epilog="""
IMPORTANT NOTES:
• All operations are logged to 'events.log' in the destination directory
• Per-file errors are printed to stderr and do not change the exit status
• Files dated before 2000-01-01 are copied into a folder named after their source folder
• Use -d/--dryrun to preview operations before making changes""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "source_dir",
        help="Source photo library. Scanned recursively; hidden files and folders are ignored.",
        metavar="SOURCE_DIR",
    )

    parser.add_argument(
        "destination_dir",
        help="Destination root for the date structured tree. Created if it doesn't exist.",
        metavar="DEST_DIR",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging, including duplicate and name conflict decisions for each file.",
    )

    parser.add_argument(
        "-d",
        "--dryrun",
        action="store_true",
        help="Dry run mode: report what would be copied without creating folders or copying files. Activities are logged with '[DRY RUN]' markers.",
    )

    parser.add_argument(
        "-L",
        "--no-follow-links",
        action="store_false",
        dest="follow_links",
        help="Do not follow symbolic links. By default linked files and folders are followed and link loops are reported and skipped.",
    )

    parser.add_argument(
        "--examples",
        action="store_true",
        help="Display usage examples and exit.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show program version and exit",
    )

    return parser.parse_args(args)


def main(args=None):
    """
    Main entry point for the script.

    Args:
        args (list, optional): Command line arguments. Defaults to None.

    Parses arguments, validates the directories, sets up logging and runs
    the sync. Per-file errors never change the exit status.
    """
    parsed_args = parse_arguments(args)

    source_dir = Path(parsed_args.source_dir).expanduser().resolve()
    destination_dir = Path(parsed_args.destination_dir).expanduser().resolve()

    # Nothing on disk is touched until the arguments check out
    validate_args(source_dir, destination_dir)

    start = time.monotonic()
    logger = set_up_logging(destination_dir, parsed_args.verbose)

    start_time = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    logger.info("=" * 80)
    logger.info("photosync - Photo Library Sync")
    logger.info(f"Version: {__version__}")
    logger.info(f"Session Started: {start_time}")
    logger.info("=" * 80)
    logger.debug("Command-line options: %s", vars(parsed_args))
    logger.info(f"Syncing Photos from Library: {source_dir} to: {destination_dir}")

    stats = recursive_walk(
        source_dir,
        destination_dir,
        logger,
        follow_symlinks=parsed_args.follow_links,
        dryrun=parsed_args.dryrun,
    )

    elapsed_ms = int((time.monotonic() - start) * 1000)
    print(f"{stats.files_visited} files checked.")
    print(f"{stats.files_copied} files copied.")
    print(f"Finished sync in: {elapsed_ms}ms")

    end_time = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    logger.info(f"Finished sync in: {elapsed_ms}ms")
    logger.info("=" * 80)
    logger.info(f"Session Ended: {end_time}")
    logger.info("=" * 80)
    logger.info("")  # Add blank line between sessions

    close_logging(logger)


if __name__ == "__main__":
    main()
