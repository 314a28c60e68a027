"""Personality Insights V3 binding."""

from pydantic import BaseModel, ConfigDict, Field

from clarety.watson.endpoint import BodyKind, post
from clarety.watson.result import Result
from clarety.watson.service import WatsonService

DEFAULT_URL = "https://gateway.watsonplatform.net/personality-insights/api"


class Trait(BaseModel):
    """A personality characteristic with its normalized score."""

    model_config = ConfigDict(extra="allow")

    trait_id: str
    name: str
    category: str
    percentile: float
    raw_score: float | None = None
    significant: bool | None = None
    children: list["Trait"] | None = None


class ProfileWarning(BaseModel):
    model_config = ConfigDict(extra="allow")

    warning_id: str
    message: str


class Profile(BaseModel):
    """Personality profile inferred from a text sample."""

    model_config = ConfigDict(extra="allow")

    processed_language: str
    word_count: int
    word_count_message: str | None = None
    personality: list[Trait] = Field(default_factory=list)
    needs: list[Trait] = Field(default_factory=list)
    values: list[Trait] = Field(default_factory=list)
    warnings: list[ProfileWarning] = Field(default_factory=list)

    def big_five(self) -> dict[str, float]:
        """Map each Big Five dimension name to its percentile."""
        return {trait.name: trait.percentile for trait in self.personality}


PROFILE = post(
    "/v3/profile",
    Profile,
    "raw_scores",
    "consumption_preferences",
    body=BodyKind.RAW,
    content_type="text/plain; charset=utf-8",
    name="profile",
)


class PersonalityInsights(WatsonService):
    """Client for the Watson Personality Insights V3 API.

    Build it with a versioned RestClient.
    """

    async def profile(
        self, text: str, *, raw_scores: bool | None = None, consumption_preferences: bool | None = None
    ) -> Result[Profile]:
        """Infer a personality profile from plain text."""
        query = {"raw_scores": raw_scores, "consumption_preferences": consumption_preferences}
        return await self._client.invoke(PROFILE, query=query, body=text)
