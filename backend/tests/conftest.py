"""Shared test configuration and fixtures."""

import io
import json
import os

# settings are read at import time; set these before anything imports config
os.environ.setdefault("OPENROUTER_API_KEY", "test-key")
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest  # noqa: E402
from docx import Document  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from models.schemas.prompt_pair import PromptPair  # noqa: E402
from models.schemas.provider_outcome import ProviderOutcome, RawContent  # noqa: E402

VALID_VERDICT_JSON = json.dumps({
    "roast": "This looks like every other weekend project.",
    "rating": "4/10",
    "keyIssues": ["No tests", "No users", "No README"],
    "actionItems": ["Write tests", "Find users", "Write a README"],
})


class FakeCompletionClient:
    """Stands in for CompletionClient; records every prompt it receives."""

    def __init__(self, outcome: ProviderOutcome) -> None:
        self.outcome = outcome
        self.prompts: list[PromptPair] = []

    async def complete(self, prompt: PromptPair) -> ProviderOutcome:
        self.prompts.append(prompt)
        return self.outcome


def build_pdf(text: str) -> bytes:
    """Build a single-page PDF with one line of Helvetica text."""
    content = f"BT /F1 24 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length " + str(len(content)).encode() + b" >>\nstream\n" + content + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"
    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref_offset}\n%%EOF\n".encode()
    return bytes(out)


def build_docx(*paragraphs: str) -> bytes:
    doc = Document()
    for paragraph in paragraphs:
        doc.add_paragraph(paragraph)
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def fake_client():
    return FakeCompletionClient(RawContent(content=VALID_VERDICT_JSON))


@pytest.fixture
def api_client(fake_client):
    from api.dependencies import get_completion_client
    from main import app

    app.dependency_overrides[get_completion_client] = lambda: fake_client
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_fake_client():
    return FakeCompletionClient


@pytest.fixture
def make_pdf():
    return build_pdf


@pytest.fixture
def make_docx():
    return build_docx
