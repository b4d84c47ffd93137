"""Documentation search API schemas (autocomplete and submit)."""

from pydantic import BaseModel, Field

from docsearch.application.dtos import RenderedMessage, Suggestion
from docsearch.shared.enums import DocSource


class AutocompleteRequest(BaseModel):
    """Partial query sent while the user is still typing."""

    query: str = Field(default="", max_length=500, description="Text typed so far")
    focused: str = Field(default="query", description="Name of the option being typed in")


class ChoiceResponse(BaseModel):
    """One selectable autocomplete choice."""

    name: str = Field(..., max_length=100)
    value: str

    @classmethod
    def from_suggestion(cls, suggestion: Suggestion) -> "ChoiceResponse":
        return cls(name=suggestion.name, value=suggestion.value)


class AutocompleteResponse(BaseModel):
    choices: list[ChoiceResponse] = Field(default_factory=list)


class SearchRequest(BaseModel):
    """Final submitted value (lookup key or free text) and optional user to ping."""

    query: str = Field(..., min_length=1, max_length=500)
    target: str | None = Field(default=None, description="User ID to mention with the results")


class AllowedMentions(BaseModel):
    users: list[str] = Field(default_factory=list)


class MessageResponse(BaseModel):
    """Rendered reply ready for the interaction transport."""

    content: str
    allowed_mentions: AllowedMentions
    ephemeral: bool = False

    @classmethod
    def from_message(cls, message: RenderedMessage) -> "MessageResponse":
        return cls(
            content=message.content,
            allowed_mentions=AllowedMentions(users=list(message.allowed_mentions)),
            ephemeral=message.ephemeral,
        )


class DocSourceResponse(BaseModel):
    key: DocSource
    name: str
    home_url: str
