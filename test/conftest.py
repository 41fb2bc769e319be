"""
Pytest configuration and shared fixtures for all tests.

This module provides in-memory stand-ins for the PDF reader and the
text-generation service so the pipeline can be exercised without network
access or real documents.
"""
import io
import threading
from typing import List, Optional

import pytest
from pypdf import PdfWriter

from backend.app.models.schemas import QuestionAnswer, UploadedFile
from backend.app.services.pipeline import PipelineController
from backend.app.services.prompt_builder import PromptBuilder


class FakePageSource:
    """Page source returning canned fragments per page."""

    def __init__(self, pages: Optional[List[List[str]]] = None, error: Optional[Exception] = None):
        self.pages = pages or []
        self.error = error
        self.calls = []

    def extract_pages(self, data: bytes) -> List[List[str]]:
        self.calls.append(data)
        if self.error:
            raise self.error
        return self.pages


class FakeExtractor:
    """Extractor returning text by filename; optionally blocks until released."""

    def __init__(self, texts: Optional[dict] = None, error: Optional[Exception] = None):
        self.texts = texts or {}
        self.error = error
        self.calls: List[UploadedFile] = []
        self.gates: dict = {}

    def hold(self, filename: str) -> threading.Event:
        gate = threading.Event()
        self.gates[filename] = gate
        return gate

    def extract(self, file: UploadedFile) -> str:
        self.calls.append(file)
        gate = self.gates.get(file.filename)
        if gate is not None:
            gate.wait(timeout=5)
        if self.error:
            raise self.error
        return self.texts.get(file.filename, "")


class FakeGenerator:
    """Async question generator recording prompts."""

    def __init__(self, questions=None, error: Optional[Exception] = None):
        self.questions = questions if questions is not None else [QuestionAnswer(question="Q1", answer="A1")]
        self.error = error
        self.prompts: List[str] = []
        self.gate = None

    async def run(self, prompt: str):
        self.prompts.append(prompt)
        if self.gate is not None:
            await self.gate.wait()
        if self.error:
            raise self.error
        return list(self.questions)


@pytest.fixture
def fake_extractor():
    return FakeExtractor(texts={"doc.pdf": "Hello World ", "a.pdf": "Text A ", "b.pdf": "Text B "})


@pytest.fixture
def fake_generator():
    return FakeGenerator()


@pytest.fixture
def controller(fake_extractor, fake_generator):
    ctrl = PipelineController(
        extractor=fake_extractor,
        prompt_builder=PromptBuilder(language="Arabic"),
        generator=fake_generator,
        language="en",
    )
    yield ctrl
    ctrl.close()


def make_pdf(name: str = "doc.pdf") -> UploadedFile:
    return UploadedFile(data=b"%PDF-1.4 fake", media_type="application/pdf", filename=name)


@pytest.fixture
def blank_pdf_bytes():
    """A real two-page PDF with no text, built with pypdf."""
    writer = PdfWriter()
    writer.add_blank_page(width=200, height=200)
    writer.add_blank_page(width=200, height=200)
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()


def build_pdf(page_contents: List[Optional[bytes]]) -> bytes:
    """
    Hand-assemble a PDF with one Helvetica text page per entry.

    An entry of None gives that page a /Contents reference to an object that
    does not exist in the file. Offsets in the xref table are computed, so
    the document is otherwise well formed.
    """
    n_pages = len(page_contents)
    font_num = 3 + n_pages
    first_stream = font_num + 1
    page_nums = list(range(3, 3 + n_pages))

    objects = {
        1: b"<< /Type /Catalog /Pages 2 0 R >>",
        2: ("<< /Type /Pages /Kids [%s] /Count %d >>"
            % (" ".join(f"{n} 0 R" for n in page_nums), n_pages)).encode(),
        font_num: b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    }
    next_stream = first_stream
    for page_num, content in zip(page_nums, page_contents):
        if content is None:
            contents_ref = 99
        else:
            contents_ref = next_stream
            objects[next_stream] = (
                b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream"
            )
            next_stream += 1
        objects[page_num] = (
            "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 200 200] "
            f"/Resources << /Font << /F1 {font_num} 0 R >> >> /Contents {contents_ref} 0 R >>"
        ).encode()

    out = bytearray(b"%PDF-1.4\n")
    offsets = {}
    for num in sorted(objects):
        offsets[num] = len(out)
        out += b"%d 0 obj\n" % num + objects[num] + b"\nendobj\n"
    size = max(objects) + 1
    xref_at = len(out)
    out += b"xref\n0 %d\n" % size
    out += b"0000000000 65535 f \n"
    for num in range(1, size):
        if num in offsets:
            out += b"%010d 00000 n \n" % offsets[num]
        else:
            out += b"0000000000 65535 f \n"
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (size, xref_at)
    return bytes(out)


def text_page(text: str) -> bytes:
    return b"BT /F1 12 Tf 20 100 Td (" + text.encode("latin-1") + b") Tj ET"
