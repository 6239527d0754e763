#!/usr/bin/env python3
"""
SMuFL Glyph Catalogue Generator

This is the authoritative catalogue generation tool. It reads the SMuFL glyph
metadata (metadata/glyphnames.json, single source of truth) and writes the
`Glyph` enum into the generated region of smufl/glyph.py.

Architecture:
  Stage 1: load_glyph_records() - Parse glyphnames.json
  Stage 2: validate_records() - Advisory code point checks
  Stage 3: synthesize_variants() - Derive a Python identifier per glyph
  Stage 4: emit_catalogue() - Render the enum and its code point tables
  Stage 5: verify_catalogue() - Compare with the committed catalogue, rewrite on drift

Exit status:
  0  catalogue is up to date
  1  catalogue was out of date (rewritten unless --check)
  2  generation failed

Usage:
  python3 generate.py [--config PATH] [--metadata PATH] [--target PATH]
  python3 generate.py --check          (report drift, do not rewrite)
  python3 generate.py --validate-only  (load and synthesize only)
  python3 generate.py --strict         (fail on validation warnings)
"""

import sys
import os
import re
import json
import keyword
import logging
import argparse
import shutil
import tempfile
from pathlib import Path
from dataclasses import dataclass
from typing import BinaryIO, Dict, Iterable, List, Optional, TextIO, Tuple, Union

import yaml

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parent.parent.parent  # tools/glyphgen -> repo
DEFAULT_CONFIG = REPO_ROOT / 'tools' / 'glyphgen' / 'glyphgen.yaml'

ENUM_NAME = 'Glyph'

BEGIN_MARKER = '# BEGIN GENERATED GLYPH CATALOGUE\n'
END_MARKER = '# END GENERATED GLYPH CATALOGUE\n'


def _marker_line(marker: str):
    # A whole line; the line ending may be CRLF
    return re.compile('^' + re.escape(marker.rstrip('\n')) + r'[ \t]*(?:\r?\n|\Z)', re.MULTILINE)


BEGIN_MARKER_LINE = _marker_line(BEGIN_MARKER)
END_MARKER_LINE = _marker_line(END_MARKER)

CODEPOINT_PATTERN = re.compile(r'U\+([0-9A-Fa-f]{1,6})')

# Acronyms (capitals not followed by a lowercase letter), capitalized or
# lowercase words, and digit runs. Anything else separates words.
WORD_PATTERN = re.compile(r'[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+')

ORDINAL_SUFFIX_PATTERN = re.compile(r'(?<=[0-9])(Th|Nd)')

DOC_COMMENT_SPECIAL = re.compile(r'([\\`*_|])')

# C0 and C1 controls; NUL in particular makes the module uncompilable
CONTROL_CHARACTERS = re.compile(r'[\x00-\x1f\x7f-\x9f]')

PUA_RANGE = (0xE000, 0xF8FF)

EXIT_UP_TO_DATE = 0
EXIT_DRIFT = 1
EXIT_FAILURE = 2


# ============================================================================
# Errors
# ============================================================================

class GlyphGenError(Exception):
    """Base class for errors that abort a generator run."""


class MalformedMetadata(GlyphGenError, ValueError):
    """The glyph metadata is not valid JSON or an entry is malformed."""

    def __init__(self, message: str, raw_name: Optional[str] = None):
        if raw_name is not None:
            message = f"{raw_name}: {message}"
        super().__init__(message)
        self.raw_name = raw_name


class MalformedCodepoint(MalformedMetadata):
    """A code point string is not `U+` followed by a Unicode scalar value in hex."""


class InvalidIdentifier(GlyphGenError):
    """Identifier synthesis produced something that is not a usable Python name."""


class IdentifierCollision(GlyphGenError):
    """Two glyph names synthesize to the same identifier."""

    def __init__(self, identifier: str, first: str, second: str):
        super().__init__(
            f"Glyphs {first!r} and {second!r} both synthesize to identifier {identifier!r}"
        )
        self.identifier = identifier
        self.raw_names = (first, second)


class MarkerError(GlyphGenError):
    """The target file's generated region cannot be located."""


class ConfigError(GlyphGenError):
    """The generator settings file is missing or malformed."""


# ============================================================================
# Data Classes
# ============================================================================

@dataclass(frozen=True)
class GlyphRecord:
    """One entry from glyphnames.json"""
    raw_name: str
    codepoint: int
    alternate_codepoint: Optional[int]
    description: str


@dataclass(frozen=True)
class GeneratedVariant:
    """One member of the emitted enum, derived from a GlyphRecord"""
    identifier: str
    display_name: str  # always the raw glyph name; emitted as the member value
    doc_comment: str
    codepoint: int
    alternate_codepoint: Optional[int]


@dataclass
class GeneratorConfig:
    """Locations of the generator's input and output"""
    metadata_path: Path
    target_path: Path


# ============================================================================
# Configuration
# ============================================================================

def load_config(config_path: Union[str, Path], root: Path = REPO_ROOT) -> GeneratorConfig:
    """
    Parse glyphgen.yaml.

    Relative paths in the file are resolved against `root`.

    Raises:
        ConfigError if the file is missing or a required key is absent
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Generator settings not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            settings = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(settings, dict):
        raise ConfigError(f"{config_path} must contain a mapping")

    paths = {}
    for key in ('metadata', 'target'):
        value = settings.get(key)
        if not isinstance(value, str) or not value:
            raise ConfigError(f"Missing required field in {config_path.name}: {key}")
        paths[key] = root / value

    return GeneratorConfig(metadata_path=paths['metadata'], target_path=paths['target'])


# ============================================================================
# Stage 1: Load Glyph Metadata
# ============================================================================

def parse_codepoint(text: str) -> int:
    """
    Parse a SMuFL code point string such as "U+E260".

    Raises:
        MalformedCodepoint if the prefix is missing, the digits are not hex,
        or the value is not a Unicode scalar value
    """
    if not isinstance(text, str):
        raise MalformedCodepoint(f"Expected a code point string, got {text!r}")
    match = CODEPOINT_PATTERN.fullmatch(text)
    if not match:
        raise MalformedCodepoint(f"Invalid code point {text!r}")
    value = int(match.group(1), 16)
    if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
        raise MalformedCodepoint(f"{text!r} is not a Unicode scalar value")
    return value


def _required_string(entry: dict, raw_name: str, field: str) -> str:
    if field not in entry:
        raise MalformedMetadata(f"Missing required field {field!r}", raw_name)
    value = entry[field]
    if not isinstance(value, str):
        raise MalformedMetadata(f"Field {field!r} must be a string, got {value!r}", raw_name)
    return value


def _parse_entry_codepoint(raw_name: str, field: str, text: str) -> int:
    try:
        return parse_codepoint(text)
    except MalformedCodepoint as e:
        raise MalformedCodepoint(f"{field}: {e}", raw_name) from e


def _check_encodable(value: str, raw_name: str, field: str) -> str:
    # JSON \uXXXX escapes can produce lone surrogates, which cannot be written out
    try:
        value.encode('utf-8')
    except UnicodeEncodeError as e:
        raise MalformedMetadata(
            f"{field} is not encodable as UTF-8: {e}", ascii(raw_name)[1:-1]) from e
    return value


def parse_glyph_record(raw_name: str, entry: object) -> GlyphRecord:
    """Build a GlyphRecord from one glyphnames.json entry."""
    _check_encodable(raw_name, raw_name, 'glyph name')
    if not isinstance(entry, dict):
        raise MalformedMetadata(f"Expected an object, got {type(entry).__name__}", raw_name)

    codepoint = _parse_entry_codepoint(
        raw_name, 'codepoint', _required_string(entry, raw_name, 'codepoint'))

    alternate_codepoint = None
    if 'alternateCodepoint' in entry:
        alternate_codepoint = _parse_entry_codepoint(
            raw_name, 'alternateCodepoint', _required_string(entry, raw_name, 'alternateCodepoint'))

    return GlyphRecord(
        raw_name=raw_name,
        codepoint=codepoint,
        alternate_codepoint=alternate_codepoint,
        description=_check_encodable(
            _required_string(entry, raw_name, 'description'), raw_name, 'description'),
    )


def load_glyph_records(stream: Union[BinaryIO, TextIO]) -> Dict[str, GlyphRecord]:
    """
    Parse glyphnames.json into GlyphRecords keyed by glyph name.

    Fields other than codepoint, alternateCodepoint and description are ignored.
    The order of the returned mapping carries no meaning.

    Raises:
        MalformedMetadata if the stream is not a JSON object of glyph entries
    """
    try:
        metadata = json.load(stream)
    except UnicodeDecodeError as e:
        raise MalformedMetadata(f"Glyph metadata is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise MalformedMetadata(f"Glyph metadata is not valid JSON: {e}") from e

    if not isinstance(metadata, dict):
        raise MalformedMetadata(
            f"Glyph metadata must be a JSON object, got {type(metadata).__name__}")

    return {
        raw_name: parse_glyph_record(raw_name, entry)
        for raw_name, entry in metadata.items()
    }


def load_glyph_records_from_path(path: Union[str, Path]) -> Dict[str, GlyphRecord]:
    """Open and parse a glyphnames.json file."""
    logger.info(f"[STAGE 1] Loading glyph metadata: {path}")
    with open(path, 'rb') as f:
        records = load_glyph_records(f)
    alternates = sum(1 for record in records.values() if record.alternate_codepoint is not None)
    logger.info(f"  ✓ {len(records)} glyphs ({alternates} with alternate code points)")
    return records


# ============================================================================
# Stage 2: Validate Glyph Metadata
# ============================================================================

def validate_records(records: Dict[str, GlyphRecord]) -> List[str]:
    """
    Advisory checks on the loaded metadata.

    Code points are not glyph identity, so nothing here is fatal on its own.

    Returns:
        One message per problem found (each is also logged as a warning)
    """
    logger.info("[STAGE 2] Validating glyph metadata")

    warnings = []

    by_codepoint: Dict[int, List[str]] = {}
    for raw_name in sorted(records):
        by_codepoint.setdefault(records[raw_name].codepoint, []).append(raw_name)
    for codepoint, raw_names in sorted(by_codepoint.items()):
        if len(raw_names) > 1:
            warnings.append(f"U+{codepoint:04X} is shared by {', '.join(raw_names)}")

    start, end = PUA_RANGE
    for raw_name in sorted(records):
        codepoint = records[raw_name].codepoint
        if not start <= codepoint <= end:
            warnings.append(
                f"{raw_name}: U+{codepoint:04X} is outside the Private Use Area "
                f"(U+{start:04X}-U+{end:04X})"
            )

    for message in warnings:
        logger.warning(f"  ⚠ {message}")
    if not warnings:
        logger.info(f"  ✓ All {len(records)} code points are distinct and in the Private Use Area")

    return warnings


# ============================================================================
# Stage 3: Synthesize Identifiers
# ============================================================================

def pascal_case(name: str) -> str:
    """
    Convert a camelCase glyph name to PascalCase.

    Digit runs are words of their own, so the letters after a number start a
    new capitalized word: "note128thUp" becomes "Note128ThUp".
    """
    return ''.join(word[0].upper() + word[1:].lower() for word in WORD_PATTERN.findall(name))


def fix_ordinal_suffixes(identifier: str) -> str:
    """Lowercase the "Th"/"Nd" that pascal_case() capitalizes after a number."""
    return ORDINAL_SUFFIX_PATTERN.sub(lambda match: match.group(1).lower(), identifier)


def synthesize_identifier(raw_name: str) -> str:
    """
    Derive the enum member name for a glyph.

    Raises:
        InvalidIdentifier if the result is not a usable Python identifier
    """
    identifier = fix_ordinal_suffixes(pascal_case(raw_name))
    if not identifier:
        raise InvalidIdentifier(f"Glyph name {raw_name!r} has no letters or digits")
    if not identifier[0].isalpha():
        identifier = '_' + identifier
    if not identifier.isidentifier() or keyword.iskeyword(identifier):
        raise InvalidIdentifier(
            f"Glyph name {raw_name!r} synthesized to invalid identifier {identifier!r}")
    return identifier


def escape_doc_comment(description: str) -> str:
    """
    Flatten a description to one line and escape reStructuredText markup.

    Control characters become spaces, so no description can end the comment
    or make the module uncompilable.
    """
    flattened = ' '.join(CONTROL_CHARACTERS.sub(' ', description).split())
    return DOC_COMMENT_SPECIAL.sub(r'\\\1', flattened)


def synthesize_variants(records: Dict[str, GlyphRecord]) -> List[GeneratedVariant]:
    """
    Derive one GeneratedVariant per glyph.

    Raises:
        IdentifierCollision if two glyph names synthesize to the same identifier
    """
    logger.info("[STAGE 3] Synthesizing identifiers")

    owners: Dict[str, str] = {}
    variants = []
    for raw_name in sorted(records):
        record = records[raw_name]
        identifier = synthesize_identifier(raw_name)
        if identifier in owners:
            raise IdentifierCollision(identifier, owners[identifier], raw_name)
        owners[identifier] = raw_name
        variants.append(GeneratedVariant(
            identifier=identifier,
            display_name=raw_name,
            doc_comment=escape_doc_comment(record.description),
            codepoint=record.codepoint,
            alternate_codepoint=record.alternate_codepoint,
        ))

    logger.info(f"  ✓ {len(variants)} unique identifiers")
    return variants


# ============================================================================
# Stage 4: Emit Catalogue
# ============================================================================

def _hex_literal(codepoint: int) -> str:
    return f'0x{codepoint:04X}'


def _string_literal(value: str) -> str:
    # JSON string syntax is a subset of Python's double-quoted literals
    return json.dumps(value, ensure_ascii=False)


def emit_catalogue(variants: Iterable[GeneratedVariant]) -> str:
    """
    Render the generated region of smufl/glyph.py.

    Members are ordered by identifier, so the same glyphs always produce the
    same text. The text expects `enum` and `Optional` to be importable names in
    the surrounding module.
    """
    ordered = sorted(variants, key=lambda variant: variant.identifier)

    lines = [
        f"class {ENUM_NAME}(enum.Enum):",
        '    """A SMuFL glyph, valued by its SMuFL glyph name."""',
        "",
    ]
    for variant in ordered:
        lines.append(f"    #: {variant.doc_comment}".rstrip())
        lines.append(f"    {variant.identifier} = {_string_literal(variant.display_name)}")

    lines.extend([
        "",
        "    @property",
        "    def codepoint(self) -> int:",
        '        """The code point of this glyph in the SMuFL range of the Private Use Area."""',
        "        return _CODEPOINTS[self]",
        "",
        "    @property",
        "    def alternate_codepoint(self) -> Optional[int]:",
        '        """The code point of this glyph in the Unicode Musical Symbols block, if any."""',
        "        return _ALTERNATE_CODEPOINTS[self]",
        "",
        "",
        f"_CODEPOINTS: dict[{ENUM_NAME}, int] = {{",
    ])
    for variant in ordered:
        lines.append(f"    {ENUM_NAME}.{variant.identifier}: {_hex_literal(variant.codepoint)},")

    lines.extend([
        "}",
        "",
        f"_ALTERNATE_CODEPOINTS: dict[{ENUM_NAME}, Optional[int]] = {{",
    ])
    for variant in ordered:
        if variant.alternate_codepoint is None:
            alternate = 'None'
        else:
            alternate = _hex_literal(variant.alternate_codepoint)
        lines.append(f"    {ENUM_NAME}.{variant.identifier}: {alternate},")
    lines.append("}")

    return '\n'.join(lines) + '\n'


def generate_catalogue(records: Dict[str, GlyphRecord]) -> str:
    """Synthesize and emit the catalogue for a set of glyph records."""
    variants = synthesize_variants(records)
    logger.info("[STAGE 4] Emitting catalogue")
    catalogue = emit_catalogue(variants)
    logger.info(f"  ✓ {len(catalogue.splitlines())} lines")
    return catalogue


# ============================================================================
# Stage 5: Verify Catalogue
# ============================================================================

def split_generated_region(text: str) -> Tuple[str, str, str]:
    """
    Split a source file into the text before, inside and after its generated region.

    The marker lines belong to the prefix and suffix. A marker only counts when
    it is a line of its own.

    Raises:
        MarkerError unless each marker occurs exactly once, begin before end
    """
    found = []
    for marker, pattern in ((BEGIN_MARKER, BEGIN_MARKER_LINE), (END_MARKER, END_MARKER_LINE)):
        matches = list(pattern.finditer(text))
        if len(matches) != 1:
            raise MarkerError(f"Expected exactly one {marker.strip()!r} line, found {len(matches)}")
        found.append(matches[0])

    start = found[0].end()
    end = found[1].start()
    if end < start:
        raise MarkerError(f"{END_MARKER.strip()!r} comes before {BEGIN_MARKER.strip()!r}")

    return text[:start], text[start:end], text[end:]


def _replace_file(path: Union[str, Path], text: str):
    """Write `text` to a sibling temporary file, then move it over `path`."""
    try:
        data = text.encode('utf-8')
    except UnicodeEncodeError as e:
        raise MalformedMetadata(f"Catalogue text is not encodable as UTF-8: {e}") from e

    path = Path(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f'.{path.name}.', suffix='.tmp', dir=path.parent)
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
        shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        os.unlink(tmp_name)
        raise


def verify_catalogue(generated: str, target_path: Union[str, Path], write: bool = True) -> bool:
    """
    Compare freshly generated text with the committed generated region.

    On a mismatch the region is replaced with `generated` (unless `write` is
    false) and the run still counts as failed, so a stale committed catalogue
    is always reported.

    Returns:
        True if the committed catalogue was already up to date
    """
    logger.info(f"[STAGE 5] Verifying catalogue: {target_path}")

    with open(target_path, 'r', encoding='utf-8', newline='') as f:
        text = f.read()

    prefix, committed, suffix = split_generated_region(text)
    if committed == generated:
        logger.info("  ✓ Catalogue is up to date")
        return True

    if write:
        _replace_file(target_path, prefix + generated + suffix)
        logger.error(f"Catalogue was out of date and has been rewritten: {target_path}")
        logger.error("Review and commit the regenerated catalogue")
    else:
        logger.error(f"Catalogue is out of date: {target_path}")
        logger.error("Run tools/glyphgen/generate.py to regenerate it")
    return False


# ============================================================================
# Pipeline
# ============================================================================

def run(config: GeneratorConfig, write: bool = True, strict: bool = False) -> bool:
    """
    Regenerate the catalogue and check it against the committed one.

    Returns:
        True if the committed catalogue was already up to date

    Raises:
        GlyphGenError on malformed metadata, identifier problems or a target
        file without its markers (or any validation warning when strict)
    """
    records = load_glyph_records_from_path(config.metadata_path)
    warnings = validate_records(records)
    if strict and warnings:
        raise MalformedMetadata(f"{len(warnings)} validation warning(s) in strict mode")
    generated = generate_catalogue(records)
    return verify_catalogue(generated, config.target_path, write=write)


# ============================================================================
# Main
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Generate the SMuFL glyph catalogue from glyphnames.json',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        '--config',
        default=str(DEFAULT_CONFIG),
        help='Path to glyphgen.yaml (default: tools/glyphgen/glyphgen.yaml)'
    )
    parser.add_argument(
        '--metadata',
        help='Path to glyphnames.json (overrides the settings file)'
    )
    parser.add_argument(
        '--target',
        help='Path to the catalogue module (overrides the settings file)'
    )
    parser.add_argument(
        '--check',
        action='store_true',
        help='Report drift without rewriting the catalogue'
    )
    parser.add_argument(
        '--validate-only',
        action='store_true',
        help='Load and synthesize only (no catalogue comparison)'
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Fail on metadata validation warnings'
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('--verbose', action='store_true', help='Log debug output')
    verbosity.add_argument('--quiet', action='store_true', help='Only log warnings and errors')

    args = parser.parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')

    try:
        config = load_config(args.config)
    except (ConfigError, OSError) as e:
        logger.error(f"Failed to load generator settings: {e}")
        return EXIT_FAILURE

    if args.metadata:
        config.metadata_path = Path(os.path.abspath(args.metadata))
    if args.target:
        config.target_path = Path(os.path.abspath(args.target))

    logger.debug(f"metadata: {config.metadata_path}")
    logger.debug(f"target:   {config.target_path}")

    if args.validate_only:
        try:
            records = load_glyph_records_from_path(config.metadata_path)
            warnings = validate_records(records)
            synthesize_variants(records)
        except (GlyphGenError, OSError) as e:
            logger.error(f"Validation failed: {e}")
            return EXIT_FAILURE
        if args.strict and warnings:
            logger.error(f"{len(warnings)} validation warning(s) in strict mode")
            return EXIT_FAILURE
        logger.info("VALIDATION PASSED (catalogue not compared)")
        return EXIT_UP_TO_DATE

    try:
        up_to_date = run(config, write=not args.check, strict=args.strict)
    except (GlyphGenError, OSError) as e:
        logger.error(f"Catalogue generation failed: {e}")
        return EXIT_FAILURE

    return EXIT_UP_TO_DATE if up_to_date else EXIT_DRIFT


if __name__ == '__main__':
    sys.exit(main())
