"""Orchestrator: roast request pipelines.

Resume:  validate -> text_extractor -> prompt_builder -> completion_client -> response_normalizer
Project: validate -> prompt_builder -> completion_client -> response_normalizer

Validation failures short-circuit before any prompt is built or any provider
call is made. A provider failure becomes a 500 with a generic message; a
reply that is not the requested JSON is not an error (see response_normalizer).
"""

import logging

from models.responses import Verdict
from models.schemas.provider_outcome import TerminalFailure
from models.schemas.roast_request import RoastRequest, SubjectKind
from services import prompt_builder, response_normalizer, text_extractor
from services.completion_client import CompletionClient
from services.errors import InvalidRequestError, UpstreamError

logger = logging.getLogger(__name__)

UPSTREAM_ERROR_MESSAGES = {
    SubjectKind.RESUME: "An error occurred while processing the resume.",
    SubjectKind.PROJECT: "An error occurred while roasting the project.",
}


def _resume_subject(request: RoastRequest) -> str:
    if request.document_bytes is None:
        raise InvalidRequestError("No file uploaded")
    return text_extractor.extract_text(request.document_bytes, request.document_format)


def _project_subject(request: RoastRequest) -> str:
    if not (request.text or "").strip() or not (request.project_link or "").strip():
        raise InvalidRequestError("Both project description and project link are required.")
    return request.text


async def roast(request: RoastRequest, client: CompletionClient) -> Verdict:
    """Run the pipeline for one submission and return its Verdict."""
    kind = request.subject_kind
    logger.info("Roast request: subject=%s tone=%s", kind.value, request.tone_level.value)

    if kind is SubjectKind.RESUME:
        subject_text = _resume_subject(request)
    else:
        subject_text = _project_subject(request)

    prompt = prompt_builder.build_prompt(kind, request.tone_level, subject_text, request.project_link)
    outcome = await client.complete(prompt)
    result = response_normalizer.normalize(kind, outcome)

    if isinstance(result, TerminalFailure):
        logger.error(
            "Roast %s failed upstream (%s): %s",
            kind.value, result.cause.kind, result.cause.detail,
        )
        raise UpstreamError(UPSTREAM_ERROR_MESSAGES[kind])
    return result
