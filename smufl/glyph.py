"""
SMuFL Glyph Catalogue

Every glyph named in the SMuFL glyph metadata, with its code point in the
SMuFL range of the Private Use Area and, where one exists, its code point in
the older Unicode Musical Symbols block.

Member values are SMuFL glyph names, so a name is looked up with
``Glyph("gClef")`` and recovered with ``Glyph.GClef.value``.

The enum below is written by tools/glyphgen/generate.py from
metadata/glyphnames.json. Edit the metadata and rerun the generator rather
than editing the generated region by hand.
"""

import enum
from typing import Optional


# BEGIN GENERATED GLYPH CATALOGUE
class Glyph(enum.Enum):
    """A SMuFL glyph, valued by its SMuFL glyph name."""

    #: 11 large diesis down, 3° down [46 EDO]
    AccSagittal11LargeDiesisDown = "accSagittal11LargeDiesisDown"
    #: 1 tina down, 7²⋅11⋅19/5-schismina down, 0.42 cents down
    AccSagittal1TinaDown = "accSagittal1TinaDown"
    #: 1 tina up, 7²⋅11⋅19/5-schismina up, 0.42 cents up
    AccSagittal1TinaUp = "accSagittal1TinaUp"
    #: Double flat
    AccidentalDoubleFlat = "accidentalDoubleFlat"
    #: Double sharp
    AccidentalDoubleSharp = "accidentalDoubleSharp"
    #: Flat
    AccidentalFlat = "accidentalFlat"
    #: Natural
    AccidentalNatural = "accidentalNatural"
    #: Sharp
    AccidentalSharp = "accidentalSharp"
    #: Reversed flat and flat
    AccidentalThreeQuarterTonesFlatZimmermann = "accidentalThreeQuarterTonesFlatZimmermann"
    #: Double barline
    BarlineDouble = "barlineDouble"
    #: Final barline
    BarlineFinal = "barlineFinal"
    #: Single barline
    BarlineSingle = "barlineSingle"
    #: C clef
    CClef = "cClef"
    #: Coda
    Coda = "coda"
    #: Forte
    DynamicForte = "dynamicForte"
    #: Piano
    DynamicPiano = "dynamicPiano"
    #: MIDI in
    ElecMidiIn = "elecMIDIIn"
    #: F clef
    FClef = "fClef"
    #: G clef
    GClef = "gClef"
    #: 128th note (semihemidemisemiquaver) stem up
    Note128thUp = "note128thUp"
    #: 16th note (semiquaver) stem up
    Note16thUp = "note16thUp"
    #: 32nd note (demisemiquaver) stem up
    Note32ndUp = "note32ndUp"
    #: 64th note (hemidemisemiquaver) stem up
    Note64thUp = "note64thUp"
    #: Eighth note (quaver) stem down
    Note8thDown = "note8thDown"
    #: Eighth note (quaver) stem up
    Note8thUp = "note8thUp"
    #: Half note (minim) stem up
    NoteHalfUp = "noteHalfUp"
    #: Quarter note (crotchet) stem up
    NoteQuarterUp = "noteQuarterUp"
    #: Whole note (semibreve)
    NoteWhole = "noteWhole"
    #: Black notehead
    NoteheadBlack = "noteheadBlack"
    #: Half (minim) notehead
    NoteheadHalf = "noteheadHalf"
    #: Whole (semibreve)
    NoteheadWhole = "noteheadWhole"
    #: 16th (semiquaver) rest
    Rest16th = "rest16th"
    #: 32nd (demisemiquaver) rest
    Rest32nd = "rest32nd"
    #: Eighth (quaver) rest
    Rest8th = "rest8th"
    #: Quarter (crotchet) rest
    RestQuarter = "restQuarter"
    #: Whole (semibreve) rest
    RestWhole = "restWhole"
    #: Segno
    Segno = "segno"
    #: Combining stem
    Stem = "stem"
    #: Common time
    TimeSigCommon = "timeSigCommon"
    #: 4-string tab clef
    _4StringTabClef = "4stringTabClef"
    #: 6-string tab clef
    _6StringTabClef = "6stringTabClef"

    @property
    def codepoint(self) -> int:
        """The code point of this glyph in the SMuFL range of the Private Use Area."""
        return _CODEPOINTS[self]

    @property
    def alternate_codepoint(self) -> Optional[int]:
        """The code point of this glyph in the Unicode Musical Symbols block, if any."""
        return _ALTERNATE_CODEPOINTS[self]


_CODEPOINTS: dict[Glyph, int] = {
    Glyph.AccSagittal11LargeDiesisDown: 0xE30D,
    Glyph.AccSagittal1TinaDown: 0xE3F3,
    Glyph.AccSagittal1TinaUp: 0xE3F2,
    Glyph.AccidentalDoubleFlat: 0xE264,
    Glyph.AccidentalDoubleSharp: 0xE263,
    Glyph.AccidentalFlat: 0xE260,
    Glyph.AccidentalNatural: 0xE261,
    Glyph.AccidentalSharp: 0xE262,
    Glyph.AccidentalThreeQuarterTonesFlatZimmermann: 0xE281,
    Glyph.BarlineDouble: 0xE031,
    Glyph.BarlineFinal: 0xE032,
    Glyph.BarlineSingle: 0xE030,
    Glyph.CClef: 0xE05C,
    Glyph.Coda: 0xE048,
    Glyph.DynamicForte: 0xE522,
    Glyph.DynamicPiano: 0xE520,
    Glyph.ElecMidiIn: 0xEB48,
    Glyph.FClef: 0xE062,
    Glyph.GClef: 0xE050,
    Glyph.Note128thUp: 0xE1DF,
    Glyph.Note16thUp: 0xE1D9,
    Glyph.Note32ndUp: 0xE1DB,
    Glyph.Note64thUp: 0xE1DD,
    Glyph.Note8thDown: 0xE1D8,
    Glyph.Note8thUp: 0xE1D7,
    Glyph.NoteHalfUp: 0xE1D3,
    Glyph.NoteQuarterUp: 0xE1D5,
    Glyph.NoteWhole: 0xE1D2,
    Glyph.NoteheadBlack: 0xE0A4,
    Glyph.NoteheadHalf: 0xE0A3,
    Glyph.NoteheadWhole: 0xE0A2,
    Glyph.Rest16th: 0xE4E7,
    Glyph.Rest32nd: 0xE4E8,
    Glyph.Rest8th: 0xE4E6,
    Glyph.RestQuarter: 0xE4E5,
    Glyph.RestWhole: 0xE4E3,
    Glyph.Segno: 0xE047,
    Glyph.Stem: 0xE210,
    Glyph.TimeSigCommon: 0xE08A,
    Glyph._4StringTabClef: 0xE06E,
    Glyph._6StringTabClef: 0xE06D,
}

_ALTERNATE_CODEPOINTS: dict[Glyph, Optional[int]] = {
    Glyph.AccSagittal11LargeDiesisDown: None,
    Glyph.AccSagittal1TinaDown: None,
    Glyph.AccSagittal1TinaUp: None,
    Glyph.AccidentalDoubleFlat: 0x1D12B,
    Glyph.AccidentalDoubleSharp: 0x1D12A,
    Glyph.AccidentalFlat: 0x266D,
    Glyph.AccidentalNatural: 0x266E,
    Glyph.AccidentalSharp: 0x266F,
    Glyph.AccidentalThreeQuarterTonesFlatZimmermann: None,
    Glyph.BarlineDouble: 0x1D101,
    Glyph.BarlineFinal: 0x1D102,
    Glyph.BarlineSingle: 0x1D100,
    Glyph.CClef: 0x1D121,
    Glyph.Coda: 0x1D10C,
    Glyph.DynamicForte: 0x1D191,
    Glyph.DynamicPiano: 0x1D18F,
    Glyph.ElecMidiIn: None,
    Glyph.FClef: 0x1D122,
    Glyph.GClef: 0x1D11E,
    Glyph.Note128thUp: 0x1D164,
    Glyph.Note16thUp: 0x1D161,
    Glyph.Note32ndUp: 0x1D162,
    Glyph.Note64thUp: 0x1D163,
    Glyph.Note8thDown: None,
    Glyph.Note8thUp: 0x1D160,
    Glyph.NoteHalfUp: 0x1D15E,
    Glyph.NoteQuarterUp: 0x1D15F,
    Glyph.NoteWhole: 0x1D15D,
    Glyph.NoteheadBlack: 0x1D158,
    Glyph.NoteheadHalf: 0x1D157,
    Glyph.NoteheadWhole: None,
    Glyph.Rest16th: 0x1D13F,
    Glyph.Rest32nd: 0x1D140,
    Glyph.Rest8th: 0x1D13E,
    Glyph.RestQuarter: 0x1D13D,
    Glyph.RestWhole: 0x1D13B,
    Glyph.Segno: 0x1D10B,
    Glyph.Stem: 0x1D165,
    Glyph.TimeSigCommon: 0x1D134,
    Glyph._4StringTabClef: None,
    Glyph._6StringTabClef: None,
}
# END GENERATED GLYPH CATALOGUE
