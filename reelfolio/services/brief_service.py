import logging

from google import genai
from google.genai import types
from pydantic import ValidationError

from reelfolio.schemas.brief import CreativeBrief

logger = logging.getLogger(__name__)

_PROMPT_TEMPLATE = """
You are an expert video production consultant assisting a professional video editor.
A potential client named "{client_name}" is inquiring about a "{project_type}" project.

Their description is: "{description}".

Please generate a professional preliminary creative brief that the video editor can review.
Analyze the client's request and provide:
1. A concise summary of the project vision.
2. A list of visual mood or style keywords (mood board suggestions).
3. An estimated generic production timeline based on the complexity (e.g., "2-3 weeks", "2 months").
4. Potential technical requirements (e.g., "Drone footage", "Motion Graphics", "Color Grading").
"""


class BriefServiceUnavailable(Exception):
    pass


class BriefGenerationError(Exception):
    pass


def build_prompt(client_name: str, project_type: str, description: str) -> str:
    return _PROMPT_TEMPLATE.format(
        client_name=client_name,
        project_type=project_type,
        description=description,
    )


class BriefService:
    def __init__(self, api_key: str, model: str) -> None:
        self._api_key = api_key
        self._model = model
        self._client: genai.Client | None = None

    def _get_client(self) -> genai.Client:
        # Created on first use so the site runs without a key; only /api/brief needs one.
        if self._client is None:
            if not self._api_key:
                raise BriefServiceUnavailable("Gemini API key not configured")
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def generate(self, client_name: str, project_type: str, description: str) -> CreativeBrief:
        """
        Ask Gemini for a preliminary creative brief as schema-constrained JSON.
        Raises BriefServiceUnavailable without an API key, BriefGenerationError on any model failure.
        """
        client = self._get_client()
        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=CreativeBrief,
        )
        try:
            response = await client.aio.models.generate_content(
                model=self._model,
                contents=build_prompt(client_name, project_type, description),
                config=config,
            )
        except Exception as exc:
            logger.error("[brief] generation failed | model=%s | error=%s", self._model, exc)
            raise BriefGenerationError(str(exc)) from exc

        text = response.text
        if not text:
            logger.error("[brief] empty response | model=%s", self._model)
            raise BriefGenerationError("No response from AI")

        try:
            brief = CreativeBrief.model_validate_json(text)
        except ValidationError as exc:
            logger.warning("[brief] response failed validation | error=%s", exc)
            raise BriefGenerationError("Malformed response from AI") from exc

        logger.info("[brief] generated | project_type=%s | client=%s", project_type, client_name)
        return brief
