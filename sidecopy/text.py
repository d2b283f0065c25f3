"""Centralized user-facing text for the sidecopy CLI."""

from __future__ import annotations

class Styles:
    ERROR = "red"
    WARNING = "yellow"
    SUCCESS = "green"
    INFO = "dim"
    TITLE = "bold cyan"
    TABLE_HEADER = "bold magenta"


class Messages:
    APP_HELP = "sidecopy – copy files and record where they came from in a sidecar index."
    HELP_COPY = "Copy files into a directory and record their provenance."
    HELP_COPY_FILES = "Source files to copy."
    HELP_DIR = "Destination directory (prompted for when omitted)."
    HELP_FORCE = "Replace read-only destinations instead of skipping them."
    HELP_VERBOSE = "Print every copied file with its metadata."
    HELP_UPDATE = "Drop index entries whose copies no longer exist."
    HELP_RECOPY = "Copy every indexed source again to refresh stale copies."
    HELP_SHOW = "Show the sidecar index of a directory."
    HELP_CONFIG = "Show or change sidecopy settings."
    HELP_SHOW_CONFIG = "Show current configuration."
    HELP_SET_ROOT = "Restrict destination directories to this root."
    HELP_CLEAR_ROOT = "Remove the root restriction."
    HELP_SET_INDEX_NAME = "Set the file name of the sidecar index."
    HELP_SET_SKIP_PROTECTED = "Skip read-only destinations (true/false)."
    HELP_SET_PROVIDERS = "Comma separated metadata providers, in order (e.g. git,hg)."
    HELP_CLEAR_LAST_DIRECTORY = "Forget the remembered destination directory."

    PROMPT_DIRECTORY = "Destination directory"

    INFO_NOTHING_TO_COPY = "Nothing to copy into {path}."
    INFO_COPIED = "Copied {count} file{plural} into {path}."
    INFO_COPIED_FILE = "{source} -> {destination} {metadata}"
    INFO_INDEX_WRITTEN = "Index saved to {path}."
    INFO_INDEX_UNCHANGED = "Index for {path} left untouched."
    INFO_INDEX_PRUNED = "Removed {count} stale entr{plural} from {path}."
    INFO_INDEX_CLEAN = "Index for {path} has no stale entries."
    INFO_INDEX_MISSING = "No sidecar index found in {path}."
    INFO_INDEX_EMPTY = "Index contains no entries."
    WARNING_PROTECTED_SKIPPED = "Skipped read-only destination {path}."
    INFO_ROOT_SET = "Root directory set to {value}."
    INFO_ROOT_CLEARED = "Root directory cleared."
    INFO_INDEX_NAME_SET = "Index file name set to {value}."
    INFO_SKIP_PROTECTED_SET = "Skip protected destinations set to {value}."
    INFO_PROVIDERS_SET = "Metadata providers set to {value}."
    INFO_LAST_DIRECTORY_CLEARED = "Remembered destination directory cleared."
    INFO_CONFIG_SUMMARY = (
        "Index file name: {index_name}\n"
        "Skip protected destinations: {skip_protected}\n"
        "Metadata providers: {providers}\n"
        "Root directory: {root}\n"
        "Last destination: {last_directory}"
    )

    ERROR_DIRECTORY_NOT_WRITABLE = "Destination directory is not writable: {path}"
    ERROR_DESTINATION_IS_DIRECTORY = "Destination is a directory, not a file: {path}"
    ERROR_SOURCE_NAMED_LIKE_INDEX = "Cannot copy {path}: its name collides with the sidecar index {name}."
    ERROR_DIRECTORY_OUTSIDE_ROOT = "Directory {path} is outside the configured root {root}."
    ERROR_INDEX_PARSE = "Could not parse sidecar index {path}: {reason}"
    ERROR_PROVIDER_UNKNOWN = "Unknown metadata provider '{value}'. Allowed values: {allowed}."
    ERROR_PROVIDERS_EMPTY = "At least one metadata provider name is required."
    ERROR_INDEX_NAME_INVALID = "Index file name must be a plain file name, got '{value}'."
    ERROR_BOOLEAN_INVALID = "Invalid boolean value '{value}'. Use true/false."
    ERROR_ROOT_CONFLICT = "--set-root and --clear-root cannot be used together."

    TABLE_TITLE = "Sidecar index of {path}"
    TABLE_HEADER_INDEX = "#"
    TABLE_HEADER_FILE = "File"
    TABLE_HEADER_SOURCE = "Source"
    TABLE_HEADER_METADATA = "Metadata"
    TABLE_HEADER_PRESENT = "Present"
