"""Pure path-string normalization and classification for Windows and Unix names.

Nothing in this package touches the filesystem: every function works on the
text of a path, so results are identical on every host. Functions that depend
on platform conventions take a ``style`` keyword; ``None`` selects the style
of the running system.
"""

from __future__ import annotations

from .case import CaseSensitivity
from .comparators import (
    Comparator,
    HasExtension,
    InsideDirectory,
    SamePath,
    WildcardName,
)
from .compare import (
    directory_contains,
    equals,
    equals_normalized,
    equals_normalized_on_system,
    equals_on_system,
)
from .components import (
    get_base_name,
    get_extension,
    get_full_path,
    get_full_path_no_end_separator,
    get_name,
    get_path,
    get_path_no_end_separator,
    index_of_extension,
    index_of_last_separator,
    is_extension,
    remove_extension,
)
from .concat import concat
from .errors import (
    AlternateDataStreamError,
    FilenormError,
    IllegalCharacterError,
    InvalidPathError,
    InvalidPrefixError,
)
from .hostnames import is_valid_host_name
from .normalize import normalize, normalize_no_end_separator
from .platform import (
    EXTENSION_SEPARATOR,
    PLATFORM_OVERRIDE_ENV,
    UNIX_SEPARATOR,
    WINDOWS_SEPARATOR,
    PathStyle,
    flip_separator,
    separators_to_system,
    separators_to_unix,
    separators_to_windows,
    system_style,
)
from .prefix import Prefix, PrefixKind, classify_prefix, get_prefix, get_prefix_length
from .wildcard import split_on_tokens, wildcard_match, wildcard_match_on_system

__all__ = [
    "EXTENSION_SEPARATOR",
    "PLATFORM_OVERRIDE_ENV",
    "UNIX_SEPARATOR",
    "WINDOWS_SEPARATOR",
    "AlternateDataStreamError",
    "CaseSensitivity",
    "Comparator",
    "FilenormError",
    "HasExtension",
    "IllegalCharacterError",
    "InsideDirectory",
    "InvalidPathError",
    "InvalidPrefixError",
    "PathStyle",
    "Prefix",
    "PrefixKind",
    "SamePath",
    "WildcardName",
    "classify_prefix",
    "concat",
    "directory_contains",
    "equals",
    "equals_normalized",
    "equals_normalized_on_system",
    "equals_on_system",
    "flip_separator",
    "get_base_name",
    "get_extension",
    "get_full_path",
    "get_full_path_no_end_separator",
    "get_name",
    "get_path",
    "get_path_no_end_separator",
    "get_prefix",
    "get_prefix_length",
    "index_of_extension",
    "index_of_last_separator",
    "is_extension",
    "is_valid_host_name",
    "normalize",
    "normalize_no_end_separator",
    "remove_extension",
    "separators_to_system",
    "separators_to_unix",
    "separators_to_windows",
    "split_on_tokens",
    "system_style",
    "wildcard_match",
    "wildcard_match_on_system",
]
