"""SEO content generation chain (article and keyword-cluster modes)."""

import logging
from enum import Enum
from typing import Annotated, Any, Literal

from langchain_core.messages import BaseMessage
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.runnables import Runnable
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from src.chains.prompts import (
    ARTICLE_SYSTEM_PROMPT,
    ARTICLE_USER_PROMPT,
    CLUSTER_SYSTEM_PROMPT,
    CLUSTER_USER_PROMPT,
)
from src.errors import ConfigurationError, EmptyGenerationError, GenerationError
from src.llm import get_llm

logger = logging.getLogger(__name__)


class ToolMode(str, Enum):
    """Generation task selected in the UI."""

    ARTICLE = "article"
    CLUSTER = "cluster"


# ============== Request Models ==============


class ArticleRequest(BaseModel):
    """Parameters for a long-form SEO article."""

    model_config = ConfigDict(str_strip_whitespace=True)

    mode: Literal["article"] = "article"
    primary_keyword: str = Field(min_length=1, description="KEY BLOG (keyword chính)")
    secondary_keywords: str = Field(
        default="", description="KEY PHỤ, mỗi keyword một dòng"
    )
    related_product: str = Field(default="", description="Link hoặc tên sản phẩm liên quan")

    @property
    def secondary_keyword_list(self) -> list[str]:
        """Non-blank secondary keywords, one per input line."""
        return [line.strip() for line in self.secondary_keywords.splitlines() if line.strip()]

    def to_prompt_variables(self) -> dict[str, str]:
        return {
            "primary_keyword": self.primary_keyword,
            "secondary_keywords": ", ".join(self.secondary_keyword_list),
            "related_product": self.related_product,
        }


class ClusterRequest(BaseModel):
    """Parameters for a keyword cluster analysis."""

    model_config = ConfigDict(str_strip_whitespace=True)

    mode: Literal["cluster"] = "cluster"
    seed_keyword: str = Field(min_length=1, description="KEY CHÍNH (sản phẩm/dịch vụ)")

    def to_prompt_variables(self) -> dict[str, str]:
        return {"seed_keyword": self.seed_keyword}


GenerationRequest = Annotated[ArticleRequest | ClusterRequest, Field(discriminator="mode")]

_request_adapter: TypeAdapter[ArticleRequest | ClusterRequest] = TypeAdapter(GenerationRequest)


def parse_generation_request(data: dict[str, Any]) -> ArticleRequest | ClusterRequest:
    """Validate a raw mapping into the request variant named by its ``mode``.

    Raises:
        pydantic.ValidationError: If the mode is unknown or a required keyword is blank.
    """
    return _request_adapter.validate_python(data)


PROMPTS: dict[ToolMode, ChatPromptTemplate] = {
    ToolMode.ARTICLE: ChatPromptTemplate.from_messages(
        [
            ("system", ARTICLE_SYSTEM_PROMPT),
            ("human", ARTICLE_USER_PROMPT),
        ]
    ),
    ToolMode.CLUSTER: ChatPromptTemplate.from_messages(
        [
            ("system", CLUSTER_SYSTEM_PROMPT),
            ("human", CLUSTER_USER_PROMPT),
        ]
    ),
}


def build_messages(request: ArticleRequest | ClusterRequest) -> list[BaseMessage]:
    """Render the system and human messages for ``request`` without a model client."""
    return PROMPTS[ToolMode(request.mode)].format_messages(**request.to_prompt_variables())


# ============== Generator ==============


class SEOContentGenerator:
    """Sends one generation request per call to Gemini and returns the raw text.

    Both modes share the same shape: the mode's instruction template is the
    system message and the serialized parameters are the single human turn.
    The returned payload is neither parsed nor sanitized.
    """

    def __init__(self, llm: Runnable | None = None):
        """Initialize the generator.

        Args:
            llm: Optional chat model (or any runnable taking a prompt value).
                Creates a Gemini client if not provided.

        Raises:
            ConfigurationError: If no llm is given and the API key is missing.
        """
        self.llm = llm or get_llm()
        self.prompts = PROMPTS
        self.chains = {
            mode: prompt | self.llm | StrOutputParser() for mode, prompt in self.prompts.items()
        }

    def build_messages(self, request: ArticleRequest | ClusterRequest) -> list[BaseMessage]:
        """Render the exact messages that would be sent for ``request``."""
        return build_messages(request)

    def generate(self, request: ArticleRequest | ClusterRequest) -> str:
        """Generate content for a request.

        Args:
            request: Article or cluster request.

        Returns:
            Raw text (HTML) from the model.

        Raises:
            GenerationError: If the upstream call fails.
            EmptyGenerationError: If the model answered with no text.
        """
        mode = ToolMode(request.mode)
        logger.info(f"Generating {mode.value} content")
        try:
            content = self.chains[mode].invoke(request.to_prompt_variables())
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error(f"{mode.value} generation failed: {e}")
            raise GenerationError(str(e)) from e
        return self._check_content(mode, content)

    async def agenerate(self, request: ArticleRequest | ClusterRequest) -> str:
        """Async version of generate."""
        mode = ToolMode(request.mode)
        logger.info(f"Generating {mode.value} content")
        try:
            content = await self.chains[mode].ainvoke(request.to_prompt_variables())
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error(f"{mode.value} generation failed: {e}")
            raise GenerationError(str(e)) from e
        return self._check_content(mode, content)

    @staticmethod
    def _check_content(mode: ToolMode, content: str | None) -> str:
        if not content or not content.strip():
            logger.warning(f"{mode.value} generation returned an empty payload")
            raise EmptyGenerationError(f"Empty response for {mode.value} request")
        logger.info(f"{mode.value} generation finished ({len(content)} chars)")
        return content
