#!/usr/bin/env python3
"""
Name: cat
Description: concatenate and print files
License: perl
"""

import sys
import os
from dataclasses import dataclass

# Constants
EX_SUCCESS = 0
EX_FAILURE = 1
PROGRAM = 'cat'
NUMBER_WIDTH = 6
ENCODING = 'utf-8'

@dataclass
class CatOptions:
    """The flags governing one cat invocation."""
    number_lines: bool = False
    number_nonblank_lines: bool = False
    show_ends: bool = False
    show_tabs: bool = False
    squeeze_blank: bool = False

def warn(message):
    print(f"{PROGRAM}: {message}", file=sys.stderr)

def describe_error(error):
    """Returns the text shown after 'cat: <path>: ' for a failed read."""
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)

def parse_args(argv):
    """
    Splits the command line into a CatOptions value and a list of files.

    Every token that starts with '-' and is longer than one character is a
    cluster of single-letter flags. Unknown letters are reported and skipped.
    A lone '-' is a file operand meaning standard input.
    """
    options = CatOptions()
    files = []

    for arg in argv:
        if not (arg.startswith('-') and len(arg) > 1):
            files.append(arg)
            continue

        for flag in arg[1:]:
            if flag == 'n':
                # -b wins over -n in whichever order they appear
                options.number_lines = not options.number_nonblank_lines
            elif flag == 'b':
                options.number_nonblank_lines = True
                options.number_lines = False
            elif flag == 'E':
                options.show_ends = True
            elif flag == 'T':
                options.show_tabs = True
            elif flag == 'A':
                options.show_ends = True
                options.show_tabs = True
            elif flag == 's':
                options.squeeze_blank = True
            else:
                warn(f"invalid option -- '{flag}'")

    return options, files

def is_blank(line):
    return not line.strip()

def format_line(line, line_number, options):
    """
    Renders one line of content. `line_number` is None for an unnumbered
    line; tabs are made visible in the content only, never in the prefix.
    """
    if options.show_tabs:
        line = line.replace('\t', '^I')
    if options.show_ends:
        line += '$'
    if line_number is None:
        return line
    return f"{line_number:{NUMBER_WIDTH}d}\t{line}"

def process_line(line, line_number, options):
    """
    Formats `line` given the running counter and returns the output text
    together with the counter value for the next line.
    """
    if options.number_nonblank_lines and is_blank(line):
        return format_line(line, None, options), line_number

    if options.number_lines or options.number_nonblank_lines:
        return format_line(line, line_number, options), line_number + 1

    return format_line(line, None, options), line_number

def strip_terminator(raw):
    """Removes a trailing LF or CRLF. A lone CR is kept as content."""
    if raw.endswith('\r\n'):
        return raw[:-2]
    if raw.endswith('\n'):
        return raw[:-1]
    return raw

def cat_lines(lines, options):
    """
    Yields the formatted form of each raw line from a single input.

    The line counter and the squeeze state live here and start over for
    every input.
    """
    line_number = 1
    was_empty = False

    for raw in lines:
        line = strip_terminator(raw)

        if options.squeeze_blank:
            is_empty = line == ''
            if is_empty and was_empty:
                continue
            was_empty = is_empty

        text, line_number = process_line(line, line_number, options)
        yield text

def decode_lines(stream):
    """
    Yields the lines of a binary stream as text. Only LF ends a line;
    content that is not UTF-8 raises UnicodeDecodeError.
    """
    for raw in stream:
        yield raw.decode(ENCODING)

def print_stream(stream, options):
    for text in cat_lines(decode_lines(stream), options):
        print(text)

def cat_file(path, options):
    """
    Prints one named file. Failures are reported on stderr and swallowed so
    that the remaining files are still processed.
    """
    if path == '-':
        print_stream(sys.stdin.buffer, options)
        return

    if not os.path.exists(path):
        warn(f"{path}: No such file or directory")
        return

    try:
        with open(path, 'rb') as f:
            print_stream(f, options)
    except (OSError, UnicodeDecodeError) as e:
        warn(f"{path}: {describe_error(e)}")

def run(files, options):
    """
    Concatenates `files` in order, or standard input when there are none.
    Errors reading standard input propagate to the caller.
    """
    if not files:
        print_stream(sys.stdin.buffer, options)
        return

    for path in files:
        cat_file(path, options)

def main(argv=None):
    """Parses arguments and runs the cat logic."""
    if argv is None:
        argv = sys.argv[1:]

    options, files = parse_args(argv)

    try:
        run(files, options)
    except (OSError, UnicodeDecodeError) as e:
        warn(f"Error: {describe_error(e)}")
        return EX_FAILURE

    return EX_SUCCESS

if __name__ == "__main__":
    sys.exit(main())
