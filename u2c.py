#!/usr/bin/env python3

r"""
Convert usx and usfm bibles to csv verse tables.

Each input file produces one csv file with a row for every verse:

    Book, Chapter, Verse, TextPlain, TextStyled, Footnotes, Crossrefs, Subtitle

Notes:
   * usx verses are only written when an end milestone (eid) closes them.
     usx 2 files without eid attributes will produce empty tables.

   * usfm footnotes and cross references must start and end on the same line.
     Notes that span lines are not extracted.

   * the subtitle is the most recent section heading before the verse starts.
     It is not cleared when a new chapter starts.

   * rows are sorted by book, numeric chapter, and verse. Verses are sorted as
     strings so 10 comes before 2.

This script is public domain. You may do whatever you want with it.

"""

# make pylint happier..
# pylint: disable=too-many-branches
# pylint: disable=too-many-instance-attributes

import csv
import logging
import os.path
import re
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser
from codecs import lookup
from functools import partial
from sys import exit as sysexit
from typing import Any, Iterator, NamedTuple
from unicodedata import normalize

import lxml.etree as et  # nosec

# -------------------------------------------------------------------------- #

META = {
    "USFM": "3.0",  # Targeted USFM version
    "USX": "3.0",  # Targeted USX version
    "VERSION": "0.3",  # THIS SCRIPT version
    "DATE": "2026-10-19",  # THIS SCRIPT revision date
}

# file extensions we know how to convert
USXEXT = {".usx"}
USFMEXT = {".usfm", ".sfm"}

# csv column order
COLUMNS = (
    "Book",
    "Chapter",
    "Verse",
    "TextPlain",
    "TextStyled",
    "Footnotes",
    "Crossrefs",
    "Subtitle",
)

# separator used when joining notes
NOTESEP = " | "

# -------------------------------------------------------------------------- #
# STYLE MAPPINGS

# character styles and the tags used for them in styled text.
# styles not listed here become span tags.
STYLETAGS = {
    "wj": "wj",
    "add": "add",
    "nd": "nd",
    "it": "i",
    "bd": "b",
    "bdit": "bdit",
}
DEFAULTTAG = "span"

# character styles whose content never reaches the output
SUPPRESSED = {"sup"}

# section, major section, and title styles. These set the subtitle.
HEADINGSTYLES = {
    "s",
    "s1",
    "s2",
    "s3",
    "s4",
    "ms",
    "ms1",
    "ms2",
    "ms3",
    "mt",
    "mt1",
    "mt2",
    "mt3",
    "mt4",
}

# note parts that carry the note text. Everything else in a note
# (origin references, keywords, quotations...) is discarded.
NOTEBODIES = {
    "footnote": ("ft",),
    "crossref": ("ft",),
}

# usx elements that separate runs of text
BLOCKTAGS = {"para", "table", "row", "cell", "sidebar", "periph"}

# -------------------------------------------------------------------------- #
# USFM TAG SETS

# identification and other tags that never contribute verse text
IDTAGS = {
    r"\id",
    r"\ide",
    r"\sts",
    r"\rem",
    r"\usfm",
    r"\h",
    r"\h1",
    r"\h2",
    r"\h3",
    r"\toc1",
    r"\toc2",
    r"\toc3",
    r"\toca1",
    r"\toca2",
    r"\toca3",
    r"\cl",
    r"\cp",
    # parallel passages, speakers, and psalm titles
    r"\r",
    r"\sr",
    r"\mr",
    r"\sp",
    r"\d",
}

# heading tags built from the heading styles above
HEADINGTAGS = {f"\\{_}" for _ in HEADINGSTYLES}

# paragraph and poetry tags
PARTAGS = {
    r"\p",
    r"\m",
    r"\po",
    r"\pr",
    r"\cls",
    r"\pmo",
    r"\pm",
    r"\pmc",
    r"\pmr",
    r"\pi",
    r"\pi1",
    r"\pi2",
    r"\pi3",
    r"\mi",
    r"\nb",
    r"\pc",
    r"\ph",
    r"\ph1",
    r"\ph2",
    r"\ph3",
    r"\b",
    r"\q",
    r"\q1",
    r"\q2",
    r"\q3",
    r"\q4",
    r"\qr",
    r"\qc",
    r"\qa",
    r"\qm",
    r"\qm1",
    r"\qm2",
    r"\qm3",
    r"\qd",
    r"\lh",
    r"\li",
    r"\li1",
    r"\li2",
    r"\li3",
    r"\li4",
    r"\lf",
    r"\lim",
    r"\lim1",
    r"\lim2",
}

# usfm line kinds
ID = "id"
CHAPTER = "chapter"
HEADING = "heading"
VERSE = "verse"
PARAGRAPH = "paragraph"
CONTINUATION = "continuation"

# -------------------------------------------------------------------------- #
# REGULAR EXPRESSIONS

SQUEEZE = partial(re.sub, r"[ \t\n\r]+", " ", flags=re.U + re.M + re.DOTALL)

# matches the tag at the start of a line and the text that follows it
LINERE = re.compile(
    r"""
        # put the tag into a named group called 'tag'
        (?P<tag>\\[A-Za-z]+\d*)

        # the tag ends the line or is followed by at least one space
        (?:\s+(?P<text>.*))?
        $
    """,
    re.U + re.VERBOSE,
)

# verse and chapter tags that follow other text on a line
INLINECVRE = re.compile(r"[ \t]*(\\[cv]\s)", re.U)

# superscript text is removed before anything else
SUPRE = re.compile(
    r"""
        # tag may have a + symbol which indicates a nested character style
        (?P<tag>\\\+?sup)

        # there is always a space between the tag and the content
        \s

        # content
        .*?

        # tag end marker
        (?P=tag)\*
    """,
    re.U + re.VERBOSE,
)

# footnotes and cross references
NOTERE = re.compile(
    r"""
        # put the footnote and cross reference markers into a named group
        # called 'tag'
        (?P<tag>

            # tags always start with a backslash
            \\

            # this matches the usfm footnote and cross reference markers.
            (?:fe|ef|ex|f|x)
        )

        # there is always at least one space following the tag.
        \s+

        # note caller
        \S

        # the caller is usually followed by a space
        \s*

        # put the note content into a named group called 'body'
        (?P<body>.*?)

        # footnote / cross reference end tag
        (?P=tag)\*
    """,
    re.U + re.VERBOSE,
)

# Automatically build the note body regexes from NOTEBODIES.
NOTEBODYRE_S = r"""
        # body tags start with a backslash and may be nested
        \\\+?

        # match the body tags we want
        (?:{})

        # there is always at least one space following the tag
        \s+

        # put the body text into a named group called 'text'
        (?P<text>.*?)

        # the body ends at the next note tag that isn't nested,
        # or at the end of the note.
        (?=\\[fx]|$)
"""
NOTEBODYRE = {
    _[0]: re.compile(NOTEBODYRE_S.format("|".join(_[1])), re.U + re.VERBOSE)
    for _ in NOTEBODIES.items()
}
del NOTEBODYRE_S

# attributes at the end of a character style, as in \w word|strong="H1"\w*
ATTRIBSTRIPRE = re.compile(r"\|[^\\|]*(?=\\\+?[A-Za-z0-9]+\*)", re.U)

# paired character styles
CHARRE = re.compile(
    r"""
        # put the tag into a named group called 'tag' and the style
        # name without backslash and + into a group called 'name'
        (?P<tag>\\\+?(?P<name>[A-Za-z][A-Za-z0-9]*))

        # there is always a space separating the tag and the content
        \s

        # put the tag content into a named group called 'text'
        (?P<text>.*?)

        # tag end marker
        (?P=tag)\*
    """,
    re.U + re.VERBOSE,
)

# regex for finding usfm tags
USFMRE = re.compile(
    r"""
    # the first character of a usfm tag is always a backslash
    \\

    # a plus symbol marks the start of a nested character style.
    # this may or may not be present.
    \+?

    # tag names are ascii letters
    [A-Za-z]+

    # tags may or may not be numbered
    \d?

    # a word boundary to mark the end of our tags.
    \b

    # character style closing tags ends with an asterisk.
    \*?
""",
    re.U + re.VERBOSE,
)

# -------------------------------------------------------------------------- #

# logging.basicConfig(format="%(levelname)s: %(message)s")
logging.basicConfig(format="%(message)s")
LOG = logging.getLogger(__name__)
LOG.setLevel(logging.WARNING)

# -------------------------------------------------------------------------- #


class ConversionError(Exception):
    """A file could not be converted."""


class VerseRecord(NamedTuple):
    """One row of output."""

    book: str
    chapter: str
    verse: str
    textplain: str
    textstyled: str
    footnotes: str
    crossrefs: str
    subtitle: str


class UsfmLine(NamedTuple):
    """A classified line of usfm."""

    kind: str
    value: str
    text: str


def cleantext(text: str) -> str:
    """Collapse whitespace and trim."""
    return SQUEEZE(text).strip()


def styletag(style: str) -> str:
    """Get the output tag for a character style."""
    return STYLETAGS.get(style, DEFAULTTAG)


def notekind(notetype: str) -> str:
    """Classify a note as footnote or crossref by its type code."""
    return "crossref" if notetype.startswith("x") else "footnote"


def notebodies(notetype: str) -> tuple[str, ...]:
    """Get the styles that hold the text of a note."""
    return NOTEBODIES[notekind(notetype)]


class VerseState:
    """
    Verse accumulator.

    Holds the chapter, the open verse, and the text and notes collected for
    it. Completed verses are added to records. One instance is used per file.

    """

    def __init__(self, book: str) -> None:
        self.book = book
        self.chapter = ""
        self.verse: str | None = None
        self.subtitle = ""
        self.versetitle = ""
        self.serial = 0
        self.plain: list[str] = []
        self.styled: list[str] = []
        self.footnotes: list[str] = []
        self.crossrefs: list[str] = []
        self.records: list[VerseRecord] = []

    @property
    def isopen(self) -> bool:
        """Return True if a verse is open."""
        return self.verse is not None

    def clear(self) -> None:
        """Clear per verse text and notes."""
        self.plain = []
        self.styled = []
        self.footnotes = []
        self.crossrefs = []

    def open(self, verse: str) -> None:
        """Open a new verse."""
        self.clear()
        self.verse = verse
        self.versetitle = self.subtitle
        self.serial += 1

    def append(self, plain: str, styled: str) -> None:
        """Append raw text fragments."""
        self.plain.append(plain)
        self.styled.append(styled)

    def appendsegment(self, plain: str, styled: str) -> None:
        """Append normalized text, separated by a space from earlier text."""
        for buf, text in ((self.plain, plain), (self.styled, styled)):
            if text:
                if buf:
                    buf.append(" ")
                buf.append(text)

    def addnote(self, notetype: str, text: str) -> None:
        """Add note text to footnotes or crossrefs. Empty text is dropped."""
        if not text:
            return
        if notekind(notetype) == "crossref":
            self.crossrefs.append(text)
        else:
            self.footnotes.append(text)

    def settitle(self, text: str) -> None:
        """Set the subtitle."""
        if text:
            self.subtitle = text

    def emit(self) -> VerseRecord | None:
        """Close the open verse, recording it if it has text."""
        record = None
        textplain = cleantext("".join(self.plain))
        if self.book and self.chapter and self.verse and textplain:
            record = VerseRecord(
                self.book,
                self.chapter,
                self.verse,
                textplain,
                cleantext("".join(self.styled)),
                NOTESEP.join(self.footnotes),
                NOTESEP.join(self.crossrefs),
                self.versetitle,
            )
            self.records.append(record)
        self.verse = None
        self.clear()
        return record


# -------------------------------------------------------------------------- #
# USX


def usx_nodes(elem: Any) -> Iterator[Any]:
    """Yield text and child elements of an element in document order."""
    if elem.text:
        yield elem.text
    for child in elem:
        yield child
        if child.tail:
            yield child.tail


def usx_suppressed(elem: Any) -> bool:
    """Check for elements whose content is never output."""
    return elem.tag == "char" and elem.get("style") in SUPPRESSED


def usx_innertext(elem: Any, skipnotes: bool = False) -> str:
    """Get text of an element and its descendants, minus suppressed text."""
    parts = []
    for node in usx_nodes(elem):
        if isinstance(node, str):
            parts.append(node)
        elif (
            isinstance(node.tag, str)
            and not usx_suppressed(node)
            and not (skipnotes and node.tag == "note")
        ):
            parts.append(usx_innertext(node, skipnotes))
    return "".join(parts)


def usx_notetext(elem: Any) -> str:
    """Get the text of the first body part of a note."""
    bodies = notebodies(elem.get("style", ""))
    for char in elem.iter("char"):
        if char.get("style") in bodies:
            return cleantext(usx_innertext(char))
    return ""


def usx_char(elem: Any, state: VerseState) -> None:
    """Process character styles."""
    style = elem.get("style", "")
    if style in SUPPRESSED:
        return
    if not state.isopen:
        usx_walk(elem, state)
        return

    tag = styletag(style)
    serial = state.serial
    state.append("", f"<{tag}>")
    usx_walk(elem, state)
    # the verse may have ended inside this element
    if state.isopen and state.serial == serial:
        state.append("", f"</{tag}>")


def usx_element(elem: Any, state: VerseState) -> None:
    """Process a single usx element."""
    tag = elem.tag
    if tag == "chapter":
        if elem.get("number"):
            state.chapter = elem.get("number")
    elif tag == "verse":
        if elem.get("eid") is not None:
            state.emit()
        elif elem.get("number"):
            state.open(elem.get("number"))
    elif tag == "note":
        state.addnote(elem.get("style", ""), usx_notetext(elem))
    elif tag in ("char", "figure"):
        usx_char(elem, state)
    elif tag in BLOCKTAGS:
        if tag == "para" and elem.get("style") in HEADINGSTYLES:
            state.settitle(cleantext(usx_innertext(elem, skipnotes=True)))
        if state.isopen:
            state.append(" ", " ")
        usx_walk(elem, state)
        if state.isopen:
            state.append(" ", " ")
    else:
        usx_walk(elem, state)


def usx_walk(elem: Any, state: VerseState) -> None:
    """Walk the children of an element."""
    for node in usx_nodes(elem):
        if isinstance(node, str):
            if state.isopen:
                text = SQUEEZE(node)
                state.append(text, text)
        elif isinstance(node.tag, str):
            usx_element(node, state)


def convert_usx(data: bytes) -> list[VerseRecord]:
    """Convert usx document to verse records."""
    parser = et.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = et.fromstring(data, parser)  # nosec
    except et.XMLSyntaxError as err:
        raise ConversionError(f"unable to parse usx: {err}") from err

    book = root.find("book")
    bookid = "" if book is None else (book.get("code") or "").strip()
    if not bookid:
        raise ConversionError("missing book id")

    LOG.info("... Processing %s ...", bookid)
    state = VerseState(bookid)
    usx_walk(root, state)
    return state.records


# -------------------------------------------------------------------------- #
# USFM


def getbookid(text: str) -> str | None:
    """Get book id from file text."""
    lines = [
        _.strip().split() for _ in text.split("\n") if _.strip().startswith("\\id ")
    ]
    return None if not lines or len(lines[0]) < 2 else lines[0][1].strip()


def getencoding(text: bytes) -> str | None:
    """Get encoding from file text."""
    lines = [_.decode("utf8") for _ in text.split(b"\n") if _.startswith(b"\\ide")]
    return "utf_8_sig" if not lines else lines[0].partition(" ")[2].lower().strip()


def usfm_lines(text: str) -> list[str]:
    """Split text into trimmed lines with chapter and verse tags first."""
    return [_.strip() for _ in INLINECVRE.sub("\n\\1", text).split("\n")]


def usfm_classify(line: str) -> UsfmLine:
    """Classify a line by the tag that starts it."""
    match = LINERE.match(line)
    if match is None:
        return UsfmLine(CONTINUATION, "", line)
    tag = match.group("tag")
    text = match.group("text") or ""

    if tag == r"\v":
        parts = text.split(None, 1)
        if not parts:
            return UsfmLine(CONTINUATION, "", line)
        return UsfmLine(VERSE, parts[0], parts[1] if len(parts) > 1 else "")
    if tag == r"\c":
        parts = text.split(None, 1)
        return UsfmLine(CHAPTER, parts[0] if parts else "", "")
    if tag in IDTAGS:
        return UsfmLine(ID, tag, text)
    if tag in HEADINGTAGS:
        return UsfmLine(HEADING, tag, text)
    if tag in PARTAGS:
        return UsfmLine(PARAGRAPH, tag, text)
    return UsfmLine(CONTINUATION, "", line)


def usfm_strip(text: str) -> str:
    """Remove usfm tags and normalize whitespace."""

    def simplerepl(match: re.Match[str]) -> str:
        """Closing tags are removed, opening tags become a space."""
        return "" if match.group().endswith("*") else " "

    return cleantext(USFMRE.sub(simplerepl, text))


def usfm_styled(text: str) -> str:
    """Convert paired character styles to output tags."""

    def simplerepl(match: re.Match[str]) -> str:
        """Simple regex replacement helper function."""
        tag = styletag(match.group("name"))
        return f'<{tag}>{match.group("text")}</{tag}>'

    text = CHARRE.sub(simplerepl, text, 0)
    # Make sure all nested tags are processed.
    # In order to avoid getting stuck here we abort
    # after a maximum of 5 attempts.
    nestcount = 0
    while "\\" in text:
        nestcount += 1
        text = CHARRE.sub(simplerepl, text, 0)
        if nestcount > 5:
            break

    return text


def usfm_notetext(notetype: str, body: str) -> str:
    """Get the text of the first body part of a note."""
    match = NOTEBODYRE[notekind(notetype)].search(body)
    return "" if match is None else usfm_strip(ATTRIBSTRIPRE.sub("", match["text"]))


def usfm_notes(text: str, state: VerseState) -> str:
    """Remove superscripts and notes from text, routing the notes."""

    def simplerepl(match: re.Match[str]) -> str:
        """Route note text and remove the note."""
        notetype = match.group("tag")[1:]
        state.addnote(notetype, usfm_notetext(notetype, match.group("body")))
        return ""

    return NOTERE.sub(simplerepl, SUPRE.sub("", text))


def usfm_heading(text: str, state: VerseState) -> str:
    """Get subtitle text from a heading. Heading notes are discarded."""
    scratch = VerseState(state.book)
    return usfm_strip(ATTRIBSTRIPRE.sub("", usfm_notes(text, scratch)))


def usfm_content(text: str, state: VerseState) -> set[str]:
    """
    Process a segment of verse text.

    Returns the set of tags left over after character styles were converted.

    """
    text = ATTRIBSTRIPRE.sub("", usfm_notes(text, state))
    styled = usfm_styled(text)
    leftover = set(USFMRE.findall(styled))
    state.appendsegment(usfm_strip(text), usfm_strip(styled))
    return leftover


def usfm_scan(text: str, bookid: str) -> list[VerseRecord]:
    """Scan usfm text line by line, collecting verse records."""
    state = VerseState(bookid)
    unhandled: set[str] = set()

    for kind, value, rest in (usfm_classify(_) for _ in usfm_lines(text) if _):
        if kind == CHAPTER:
            state.emit()
            state.chapter = value
        elif kind == HEADING:
            state.settitle(usfm_heading(rest, state))
        elif kind == VERSE:
            state.emit()
            state.open(value)
            unhandled.update(usfm_content(rest, state))
        elif kind in (PARAGRAPH, CONTINUATION) and state.isopen:
            unhandled.update(usfm_content(rest, state))
    state.emit()

    if unhandled:
        LOG.warning("Unhandled USFM Tags in %s: %s", bookid, ", ".join(sorted(unhandled)))
    return state.records


def convert_usfm(text: str) -> list[VerseRecord]:
    """Convert usfm text to verse records."""
    bookid = getbookid(text)
    if bookid is None:
        raise ConversionError(r"missing \id line")
    LOG.info("... Processing %s ...", bookid)
    return usfm_scan(text, bookid)


# -------------------------------------------------------------------------- #


def getfilelist(inpath: str) -> list[str]:
    """Get list of files to convert from a file or directory name."""
    exts = USXEXT | USFMEXT
    if os.path.isdir(inpath):
        return [
            os.path.join(inpath, _)
            for _ in sorted(os.listdir(inpath))
            if os.path.splitext(_)[1].lower() in exts
            and os.path.isfile(os.path.join(inpath, _))
        ]
    if os.path.isfile(inpath) and os.path.splitext(inpath)[1].lower() in exts:
        return [inpath]
    return []


def proc_readfile(fname: str, fencoding: str | None) -> str:
    """Read a usfm file and return its contents."""
    try:
        with open(fname, "rb") as ifile:
            text = ifile.read()
    except OSError as err:
        raise ConversionError(f"unable to read file: {err}") from err

    # strip whitespace from beginning and end of file
    text = text.strip()

    # get encoding. default to utf_8_sig encoding if no encoding is specified.
    try:
        bookencoding = lookup(
            fencoding if fencoding is not None else getencoding(text) or "utf_8_sig"
        ).name
    except LookupError as err:
        raise ConversionError(f"unknown encoding: {err}") from err
    except UnicodeDecodeError as err:
        raise ConversionError(f"unreadable \\ide line: {err}") from err

    # use utf_8_sig in place of utf_8 encoding to eliminate errors that
    # may occur if a Byte Order Mark is present in the input file.
    if "utf-8" in bookencoding or bookencoding == "utf_8":
        bookencoding = "utf_8_sig"

    try:
        return text.decode(bookencoding)
    except UnicodeDecodeError as err:
        raise ConversionError(f"unable to decode as {bookencoding}: {err}") from err


def doconvert(fname: str, fencoding: str | None = None) -> list[VerseRecord]:
    """Convert a usx or usfm file and return its verse records."""
    if os.path.splitext(fname)[1].lower() in USXEXT:
        try:
            with open(fname, "rb") as ifile:
                data = ifile.read()
        except OSError as err:
            raise ConversionError(f"unable to read file: {err}") from err
        return convert_usx(data)
    return convert_usfm(proc_readfile(fname, fencoding))


def sortkey(record: VerseRecord) -> tuple[Any, ...]:
    """Sort by book, numeric chapter, then verse as a string."""
    chapter = (
        (0, int(record.chapter), "")
        if record.chapter.isdigit()
        else (1, 0, record.chapter)
    )
    return (record.book, chapter, record.verse)


def proc_writecsv(
    records: list[VerseRecord], outfile: str, nonormalize: bool = False
) -> None:
    """Sort records and write them to a csv file."""
    rows = sorted(records, key=sortkey)
    with open(outfile, "w", encoding="utf_8", newline="") as ofile:
        writer = csv.writer(ofile)
        writer.writerow(COLUMNS)
        for row in rows:
            # apply NFC normalization to text unless explicitly disabled.
            writer.writerow(row if nonormalize else [normalize("NFC", _) for _ in row])


def processfiles(
    fnames: list[str],
    fencoding: str | None,
    outdir: str | None,
    nonormalize: bool,
) -> list[str]:
    """Convert files one at a time. Returns the csv files written."""
    written = []

    for fname in fnames:
        LOG.info("Reading %s...", fname)
        try:
            records = doconvert(fname, fencoding)
        except ConversionError as err:
            LOG.error("*** %s: %s. Skipping file. ***", fname, err)
            continue

        basename = os.path.splitext(os.path.basename(fname))[0]
        outfile = os.path.join(
            outdir if outdir else os.path.dirname(fname), f"{basename}.csv"
        )
        try:
            if outdir:
                os.makedirs(outdir, exist_ok=True)
            proc_writecsv(records, outfile, nonormalize)
        except OSError as err:
            LOG.error("*** %s: unable to write %s: %s. Skipping file. ***", fname, outfile, err)
            continue
        LOG.debug("%s: %d verses written to %s", fname, len(records), outfile)
        written.append(outfile)

    return written


# -------------------------------------------------------------------------- #


def main(argv: list[str] | None = None) -> None:
    """Command line interface."""
    parser = ArgumentParser(
        formatter_class=ArgumentDefaultsHelpFormatter,
        description="""
            convert USX and USFM bibles to CSV verse tables.
        """,
        epilog=f"""
            * Version: {META["VERSION"]} * {META["DATE"]} * This script is public domain. *
        """,
    )
    parser.add_argument("-d", help="debug mode", action="store_true")
    parser.add_argument(
        "-e",
        help="set encoding to use for USFM files",
        default=None,
        metavar="encoding",
    )
    parser.add_argument(
        "-o", help="specify output directory", default=None, metavar="output_dir"
    )
    parser.add_argument("-v", help="verbose output", action="store_true")
    parser.add_argument(
        "-n", help="disable unicode NFC normalization", action="store_true"
    )
    parser.add_argument(
        "input",
        help="usx, usfm, or sfm file, or a directory containing them",
        metavar="input",
    )
    args = parser.parse_args(argv)

    if args.v:
        LOG.setLevel(logging.INFO)
    if args.d:
        LOG.setLevel(logging.DEBUG)

    if not os.path.exists(args.input):
        LOG.error("*** input file or directory not present. ***")
        sysexit(1)
    fnames = getfilelist(args.input)
    if not fnames:
        if os.path.isdir(args.input):
            LOG.error("*** no usx, usfm, or sfm files found in %s. ***", args.input)
        else:
            LOG.error("*** unsupported file type: %s ***", args.input)
        sysexit(1)

    processfiles(fnames, args.e, args.o, args.n)


if __name__ == "__main__":
    main()
