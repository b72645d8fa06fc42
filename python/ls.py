#!/usr/bin/env python3

"""
Name: ls
Description: list file/directory information
License: perl
"""

import sys
import errno
import os
import stat
from dataclasses import dataclass
from pathlib import Path

# Constants
EX_SUCCESS = 0
EX_FAILURE = 1
PROGRAM = 'ls'
SIZE_WIDTH = 8
MTIME_WIDTH = 12

@dataclass
class LsOptions:
    show_hidden: bool = False
    long_format: bool = False

@dataclass(frozen=True)
class FileEntry:
    """
    A directory entry together with the metadata captured when the
    directory was read. The snapshot is never refreshed.
    """
    path: Path
    metadata: os.stat_result
    name: str

    @classmethod
    def from_dir_entry(cls, entry):
        # Symbolic links are described, not followed
        metadata = entry.stat(follow_symlinks=False)
        return cls(path=Path(entry.path), metadata=metadata, name=display_name(entry.name))

    @property
    def is_dir(self):
        return stat.S_ISDIR(self.metadata.st_mode)

    @property
    def is_hidden(self):
        return self.name.startswith('.')

    @property
    def size(self):
        return self.metadata.st_size

    @property
    def modified_timestamp(self):
        return max(0, int(self.metadata.st_mtime))

    @property
    def permissions(self):
        return self.metadata.st_mode

def display_name(name):
    """
    Returns `name` with any bytes that are not valid UTF-8 replaced by
    U+FFFD, so that every name can be written to stdout.
    """
    return os.fsencode(name).decode('utf-8', 'replace')

def parse_args(argv):
    """
    Returns (path, LsOptions). The target is the first operand that is not a
    flag cluster; unrecognized flag letters are ignored.
    """
    options = LsOptions()
    path = None

    for arg in argv:
        if arg.startswith('-') and len(arg) > 1:
            for flag in arg[1:]:
                if flag == 'a':
                    options.show_hidden = True
                elif flag == 'l':
                    options.long_format = True
        elif path is None:
            path = arg

    return path or '.', options

def format_mode(mode, is_dir):
    """
    Formats the file mode into a ten character string such as '-rwxr-xr-x'.
    Only the directory bit and the low nine permission bits are shown.
    """
    perms = ['---', '--x', '-w-', '-wx', 'r--', 'r-x', 'rw-', 'rwx']
    file_type = 'd' if is_dir else '-'

    return file_type + perms[(mode & 0o700) >> 6] + perms[(mode & 0o070) >> 3] + perms[mode & 0o007]

def format_simple(entry):
    return f"{entry.name}/" if entry.is_dir else entry.name

def format_long(entry):
    mode_str = format_mode(entry.permissions, entry.is_dir)
    return f"{mode_str} {entry.size:>{SIZE_WIDTH}} {entry.modified_timestamp:>{MTIME_WIDTH}} {entry.name}"

# Keyed by LsOptions.long_format
FORMATTERS = {
    False: format_simple,
    True: format_long,
}

def hidden_filter(options):
    """Builds the predicate that drops dotfiles unless -a was given."""
    def include(entry):
        return options.show_hidden or not entry.is_hidden
    return include

def build_filters(options):
    return [hidden_filter(options)]

def should_include(entry, filters):
    return all(accept(entry) for accept in filters)

def collect_entries(path):
    """
    Reads every entry of the directory at `path` and returns them sorted by
    name. Any failure, on the directory or on a single entry, propagates.
    """
    entries = []
    with os.scandir(path) as it:
        for dir_entry in it:
            entries.append(FileEntry.from_dir_entry(dir_entry))

    entries.sort(key=lambda entry: entry.name)
    return entries

def check_target(path):
    """Returns `path` as a Path, raising FileNotFoundError if it does not exist."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
    return p

def list_directory(path, options):
    """
    Returns the output lines for `path`.

    A path that does not exist raises FileNotFoundError. A path that is not a
    directory yields only its own name, whatever the options.
    """
    p = check_target(path)

    if not p.is_dir():
        return [display_name(p.name)]

    entries = collect_entries(p)
    formatter = FORMATTERS[options.long_format]
    filters = build_filters(options)

    return [formatter(entry) for entry in entries if should_include(entry, filters)]

def run(path, options):
    """Prints the listing for `path`. Nothing is printed if listing fails."""
    for line in list_directory(path, options):
        print(line)

def main(argv=None):
    """Main function to process command-line arguments and run the ls command."""
    if argv is None:
        argv = sys.argv[1:]

    path, options = parse_args(argv)

    try:
        check_target(path)
    except FileNotFoundError:
        sys.stderr.write(f"{PROGRAM}: cannot access '{path}': No such file or directory\n")
        return EX_FAILURE

    # From here on a missing file is an entry that vanished mid-listing
    try:
        run(path, options)
    except OSError as e:
        sys.stderr.write(f"{PROGRAM}: failed to open directory '{path}': {e.strerror}\n")
        return EX_FAILURE

    return EX_SUCCESS

if __name__ == '__main__':
    sys.exit(main())
