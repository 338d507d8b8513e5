"""
Pytest fixtures: small .docx documents built with python-docx
"""

import zipfile

import pytest
from docx import Document
from docx.oxml import parse_xml
from docx.oxml.ns import nsdecls


def _save(document, path):
    document.save(str(path))
    return path


def _append_block(document, element):
    """Insert a block-level element at the end of the body, before sectPr"""
    body = document.element.body
    if body.sectPr is not None:
        body.sectPr.addprevious(element)
    else:
        body.append(element)


def block_sdt_xml(alias, text, inner=""):
    return (
        f'<w:sdt {nsdecls("w")}>'
        f'<w:sdtPr><w:alias w:val="{alias}"/><w:tag w:val="{alias.lower()}"/></w:sdtPr>'
        f'<w:sdtContent><w:p><w:r><w:t>{text}</w:t></w:r></w:p>{inner}</w:sdtContent>'
        '</w:sdt>'
    )


def run_sdt_xml(alias, text):
    return (
        f'<w:sdt {nsdecls("w")}>'
        f'<w:sdtPr><w:alias w:val="{alias}"/></w:sdtPr>'
        f'<w:sdtContent><w:r><w:t>{text}</w:t></w:r></w:sdtContent>'
        '</w:sdt>'
    )


@pytest.fixture
def plain_docx(tmp_path):
    """Document without tags or content controls"""
    document = Document()
    document.add_paragraph("Nothing to replace here.")
    document.add_paragraph("Braces alone { } | are not tags.")
    return _save(document, tmp_path / "plain.docx")


@pytest.fixture
def tagged_docx(tmp_path):
    """Document with |{Title}| in a bold run and |{Subtitle}| split over two runs"""
    document = Document()
    title = document.add_paragraph()
    title.add_run("Report: ")
    title.add_run("|{Title}|").bold = True

    subtitle = document.add_paragraph()
    subtitle.add_run("|{Sub")
    subtitle.add_run("title}|")

    document.add_paragraph("Body text without markup.")
    return _save(document, tmp_path / "tagged.docx")


@pytest.fixture
def repeated_tags_docx(tmp_path):
    """Same tag several times, in paragraphs and in a table"""
    document = Document()
    document.add_paragraph("|{Title}| and again |{Title}|")
    table = document.add_table(rows=1, cols=2)
    table.cell(0, 0).text = "|{Name}|"
    table.cell(0, 1).text = "|{Title}|"
    return _save(document, tmp_path / "repeated.docx")


@pytest.fixture
def header_docx(tmp_path):
    """Tags in the body and in the first section header"""
    document = Document()
    document.add_paragraph("|{Title}|")
    document.sections[0].header.paragraphs[0].text = "Header |{Title}|"
    return _save(document, tmp_path / "header.docx")


@pytest.fixture
def aliased_docx(tmp_path):
    """
    Six distinct aliases: block, nested and run-level content controls.
    Notes is declared twice.
    """
    document = Document()
    document.add_paragraph("Contract")

    nested = block_sdt_xml("Address", "1 Main Street")
    _append_block(document, parse_xml(block_sdt_xml("Customer", "ACME Corp", inner=nested)))
    _append_block(document, parse_xml(block_sdt_xml("Terms", "Net 30")))

    signed = document.add_paragraph("Signed: ")
    signed._p.append(parse_xml(run_sdt_xml("Signature", "J. Doe")))
    signed._p.append(parse_xml(run_sdt_xml("Date", "2024-01-01")))

    _append_block(document, parse_xml(block_sdt_xml("Notes", "First note")))
    _append_block(document, parse_xml(block_sdt_xml("Notes", "Second note")))
    document.add_paragraph("Closing words")
    return _save(document, tmp_path / "aliased.docx")


DOCUMENT_MAIN = "application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"

NOTES_PARTS = {
    "footnotes": (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.footnotes+xml",
        "http://schemas.openxmlformats.org/officeDocument/2006/relationships/footnotes",
        "Footnote on |{Title}|",
    ),
    "endnotes": (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.endnotes+xml",
        "http://schemas.openxmlformats.org/officeDocument/2006/relationships/endnotes",
        "Endnote on |{Title}|",
    ),
}


def _rewrite_package(path, replace):
    """Rewrite the zip at ``path``; ``replace`` maps member names to a function of their text"""
    with zipfile.ZipFile(path) as original:
        members = [(item.filename, original.read(item.filename)) for item in original.infolist()]
    names = [name for name, _ in members]
    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as archive:
        for name, data in members:
            if name in replace:
                data = replace[name](data.decode("utf-8")).encode("utf-8")
            archive.writestr(name, data)
        for name, build in replace.items():
            if name not in names:
                archive.writestr(name, build(None).encode("utf-8"))
    return path


@pytest.fixture
def notes_docx(tmp_path):
    """|{Title}| in the body, in a footnote and in an endnote"""
    document = Document()
    document.add_paragraph("|{Title}|")
    path = _save(document, tmp_path / "notes.docx")

    overrides = "".join(
        f'<Override PartName="/word/{kind}.xml" ContentType="{content_type}"/>'
        for kind, (content_type, _, _) in NOTES_PARTS.items()
    )
    relationships = "".join(
        f'<Relationship Id="rIdNote{index}" Type="{rel_type}" Target="{kind}.xml"/>'
        for index, (kind, (_, rel_type, _)) in enumerate(NOTES_PARTS.items())
    )

    def notes_xml(kind, text):
        item = kind[:-1]
        return lambda _: (
            '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
            f'<w:{kind} {nsdecls("w")}>'
            f'<w:{item} w:id="1"><w:p><w:r><w:t>{text}</w:t></w:r></w:p></w:{item}>'
            f'</w:{kind}>'
        )

    replace = {
        "[Content_Types].xml": lambda xml: xml.replace("</Types>", overrides + "</Types>"),
        "word/_rels/document.xml.rels": lambda xml: xml.replace(
            "</Relationships>", relationships + "</Relationships>"
        ),
    }
    for kind, (_, _, text) in NOTES_PARTS.items():
        replace[f"word/{kind}.xml"] = notes_xml(kind, text)
    return _rewrite_package(path, replace)


@pytest.fixture
def word_package(tagged_docx):
    """Factory: the tagged document with its main part declared as ``content_type``"""
    def make(content_type):
        return _rewrite_package(tagged_docx, {
            "[Content_Types].xml": lambda xml: xml.replace(DOCUMENT_MAIN, content_type),
        })
    return make


@pytest.fixture
def unnamed_alias_docx(tmp_path):
    """One content control with an alias value and one whose alias has none"""
    document = Document()
    _append_block(document, parse_xml(block_sdt_xml("Kept", "Named control")))
    _append_block(document, parse_xml(
        f'<w:sdt {nsdecls("w")}><w:sdtPr><w:alias/></w:sdtPr>'
        '<w:sdtContent><w:p><w:r><w:t>Unnamed control</w:t></w:r></w:p></w:sdtContent></w:sdt>'
    ))
    return _save(document, tmp_path / "unnamed.docx")


@pytest.fixture
def bodyless_docx(plain_docx):
    """Main part reduced to an empty w:document"""
    return _rewrite_package(plain_docx, {
        "word/document.xml": lambda _: (
            '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
            f'<w:document {nsdecls("w")}/>'
        ),
    })
