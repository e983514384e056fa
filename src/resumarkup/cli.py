#!/usr/bin/env python3
"""Command-line front end for resumarkup

  resumarkup INPUT              ResuMarkup -> Typst -> PDF
  resumarkup INPUT --typst-only ResuMarkup -> Typst
  resumarkup INPUT --ir         print the compiled document as JSON

Arguments the parser does not know are reported and otherwise ignored.
"""

import argparse
import json
import pathlib
import subprocess
import sys
import tempfile

from .errors import MissingInputPath, ResuMarkupError
from .fonts import load_configured_font
from .generator import generate_typst
from .parser import parse_resume


def _check_typst_binary(typst_bin: str = 'typst') -> bool:
    """Check if Typst binary is available and working"""
    try:
        result = subprocess.run(
            [typst_bin, '--version'], capture_output=True, text=True, timeout=10
        )
        if result.returncode == 0:
            return True
        else:
            print(
                f"ERROR: Typst binary '{typst_bin}' returned error code {result.returncode}",
                file=sys.stderr,
            )
            return False
    except FileNotFoundError:
        print(f"ERROR: Typst binary '{typst_bin}' not found in PATH", file=sys.stderr)
        print("Please install Typst: https://github.com/typst/typst/releases", file=sys.stderr)
        return False
    except subprocess.TimeoutExpired:
        print(f"ERROR: Typst binary '{typst_bin}' timed out", file=sys.stderr)
        return False


def _write(path: pathlib.Path, data: str):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data, encoding='utf-8')


def _compile_pdf(
    typst_file: pathlib.Path,
    pdf_path: pathlib.Path,
    font_dir=None,
    typst_bin: str = 'typst',
) -> bool:
    if not _check_typst_binary(typst_bin):
        return False

    cmd = [typst_bin, 'compile']
    if font_dir is not None:
        cmd.extend(['--font-path', str(font_dir)])
    cmd.extend([str(typst_file), str(pdf_path)])

    try:
        res = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError:
        print(f"ERROR: typst binary not found at '{typst_bin}'", file=sys.stderr)
        return False
    if res.returncode != 0:
        print(
            f"ERROR: Typst compile failed (exit {res.returncode}):\n{res.stderr}",
            file=sys.stderr,
        )
        return False
    return True


def run(args) -> bool:
    if not args.input:
        raise MissingInputPath()
    source = pathlib.Path(args.input)
    document = parse_resume(source)

    if args.ir:
        print(json.dumps(document.to_ir(), indent=2))
        return True

    font = load_configured_font(document.configuration)
    typst_code = generate_typst(document, family_name=font.family_name)
    nblocks = len(document.blocks)

    if args.typst_only:
        typst_path = pathlib.Path(args.typst_output or f"{source.stem}.typ")
        _write(typst_path, typst_code)
        print(f"Built Typst: {typst_path} blocks={nblocks}")
        return True

    pdf_path = pathlib.Path(args.output or f"{source.stem}.pdf")
    if args.typst_output:
        typst_path = pathlib.Path(args.typst_output)
        _write(typst_path, typst_code)
        ok = _compile_pdf(typst_path, pdf_path, font.directory, args.typst_bin)
    else:
        with tempfile.TemporaryDirectory(prefix='rm_typst_') as td:
            typst_path = pathlib.Path(td) / f"{source.stem}.typ"
            _write(typst_path, typst_code)
            ok = _compile_pdf(typst_path, pdf_path, font.directory, args.typst_bin)
    print(f"PDF build success={ok} pdf={pdf_path} blocks={nblocks}")
    return ok


def build_parser():
    p = argparse.ArgumentParser(prog='resumarkup', description='ResuMarkup -> Typst -> PDF')
    p.add_argument('input', nargs='?', help='ResuMarkup source file')
    p.add_argument('-o', '--output', help='PDF output path (default: <input stem>.pdf)')
    p.add_argument('--typst-output', help='keep the generated Typst source at this path')
    p.add_argument('--typst-only', action='store_true', help='write Typst source, skip PDF')
    p.add_argument('--ir', action='store_true', help='print the compiled document as JSON')
    p.add_argument('--typst-bin', default='typst')
    return p


def main(argv=None):
    parser = build_parser()
    args, unknown = parser.parse_known_args(argv)
    for opt in unknown:
        print(f"Option not recognized: {opt}", file=sys.stderr)
    try:
        ok = run(args)
    except ResuMarkupError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    if not ok:
        sys.exit(1)


if __name__ == '__main__':
    main()
