"""Conversation V1 payloads.

Request models (Create*/Update*) are serialized with None fields omitted.
Response models keep unknown fields so newer API revisions decode cleanly.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WatsonModel(BaseModel):
    """Base for all Conversation payloads."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Pagination(WatsonModel):
    """Paging metadata attached to every collection."""

    refresh_url: str | None = None
    next_url: str | None = None
    total: int | None = None
    matched: int | None = None
    refresh_cursor: str | None = None
    next_cursor: str | None = None


class Collection(WatsonModel):
    """Base for list results: items plus pagination."""

    pagination: Pagination = Field(default_factory=Pagination)

    @property
    def next_cursor(self) -> str | None:
        """Cursor for the next page, or None on the last page."""
        return self.pagination.next_cursor


# --- Message ---


class InputData(WatsonModel):
    """The user's input."""

    text: str


class Context(WatsonModel):
    """Conversation state, echoed back on every turn."""

    conversation_id: str | None = None
    system: dict[str, Any] | None = None


class RuntimeIntent(WatsonModel):
    """An intent recognized in the user input."""

    intent: str
    confidence: float


class RuntimeEntity(WatsonModel):
    """An entity recognized in the user input."""

    entity: str
    location: list[int] = Field(default_factory=list)
    value: str
    confidence: float | None = None
    metadata: dict[str, Any] | None = None


class OutputData(WatsonModel):
    """Dialog output: reply text and diagnostics."""

    text: list[str] = Field(default_factory=list)
    log_messages: list[dict[str, Any]] = Field(default_factory=list)
    nodes_visited: list[str] | None = None


class MessageRequest(WatsonModel):
    """Body of a message call."""

    input: InputData | None = None
    alternate_intents: bool | None = None
    context: Context | None = None
    entities: list[RuntimeEntity] | None = None
    intents: list[RuntimeIntent] | None = None
    output: OutputData | None = None


class MessageResponse(WatsonModel):
    """The bot's reply to one message."""

    input: InputData | None = None
    intents: list[RuntimeIntent] = Field(default_factory=list)
    entities: list[RuntimeEntity] = Field(default_factory=list)
    alternate_intents: bool | None = None
    context: Context = Field(default_factory=Context)
    output: OutputData = Field(default_factory=OutputData)

    @property
    def reply(self) -> str:
        """Reply text with all output lines joined."""
        return "".join(self.output.text)


# --- Examples ---


class CreateExample(WatsonModel):
    text: str


class UpdateExample(WatsonModel):
    text: str | None = None


class Example(WatsonModel):
    """A user input example belonging to an intent."""

    text: str
    created: datetime | None = None
    updated: datetime | None = None


class ExampleCollection(Collection):
    examples: list[Example] = Field(default_factory=list)


# --- Intents ---


class CreateIntent(WatsonModel):
    intent: str
    description: str | None = None
    examples: list[CreateExample] | None = None


class UpdateIntent(WatsonModel):
    intent: str | None = None
    description: str | None = None
    examples: list[CreateExample] | None = None


class Intent(WatsonModel):
    intent: str
    description: str | None = None
    created: datetime | None = None
    updated: datetime | None = None


class IntentExport(Intent):
    """Intent with its examples (``export=true``)."""

    examples: list[Example] | None = None


class IntentCollection(Collection):
    intents: list[IntentExport] = Field(default_factory=list)


# --- Synonyms ---


class CreateSynonym(WatsonModel):
    synonym: str


class UpdateSynonym(WatsonModel):
    synonym: str | None = None


class Synonym(WatsonModel):
    synonym: str
    created: datetime | None = None
    updated: datetime | None = None


class SynonymCollection(Collection):
    synonyms: list[Synonym] = Field(default_factory=list)


# --- Values ---


class CreateValue(WatsonModel):
    value: str
    metadata: dict[str, Any] | None = None
    synonyms: list[str] | None = None


class UpdateValue(WatsonModel):
    value: str | None = None
    metadata: dict[str, Any] | None = None
    synonyms: list[str] | None = None


class Value(WatsonModel):
    value: str
    metadata: dict[str, Any] | None = None
    created: datetime | None = None
    updated: datetime | None = None


class ValueExport(Value):
    """Entity value with its synonyms (``export=true``)."""

    synonyms: list[str] | None = None


class ValueCollection(Collection):
    values: list[ValueExport] = Field(default_factory=list)


# --- Entities ---


class CreateEntity(WatsonModel):
    entity: str
    description: str | None = None
    metadata: dict[str, Any] | None = None
    values: list[CreateValue] | None = None
    fuzzy_match: bool | None = None


class UpdateEntity(WatsonModel):
    entity: str | None = None
    description: str | None = None
    metadata: dict[str, Any] | None = None
    values: list[CreateValue] | None = None
    fuzzy_match: bool | None = None


class Entity(WatsonModel):
    entity: str
    description: str | None = None
    metadata: dict[str, Any] | None = None
    fuzzy_match: bool | None = None
    created: datetime | None = None
    updated: datetime | None = None


class EntityExport(Entity):
    """Entity with its values (``export=true``)."""

    values: list[ValueExport] | None = None


class EntityCollection(Collection):
    entities: list[EntityExport] = Field(default_factory=list)


# --- Dialog nodes ---


class DialogNodeFields(WatsonModel):
    """Fields shared by dialog node requests and responses."""

    description: str | None = None
    conditions: str | None = None
    parent: str | None = None
    previous_sibling: str | None = None
    output: dict[str, Any] | None = None
    context: dict[str, Any] | None = None
    metadata: dict[str, Any] | None = None
    next_step: dict[str, Any] | None = None
    title: str | None = None
    node_type: str | None = Field(default=None, alias="type")
    event_name: str | None = None
    variable: str | None = None


class CreateDialogNode(DialogNodeFields):
    dialog_node: str


class UpdateDialogNode(DialogNodeFields):
    """New contents for a dialog node. ``dialog_node`` renames it."""

    dialog_node: str | None = None


class DialogNode(DialogNodeFields):
    dialog_node: str
    created: datetime | None = None
    updated: datetime | None = None


class DialogNodeCollection(Collection):
    dialog_nodes: list[DialogNode] = Field(default_factory=list)


# --- Counterexamples ---


class CreateCounterexample(WatsonModel):
    text: str


class UpdateCounterexample(WatsonModel):
    text: str | None = None


class Counterexample(WatsonModel):
    """User input marked as irrelevant."""

    text: str
    created: datetime | None = None
    updated: datetime | None = None


class CounterexampleCollection(Collection):
    counterexamples: list[Counterexample] = Field(default_factory=list)


# --- Workspaces ---


class CreateWorkspace(WatsonModel):
    name: str | None = None
    description: str | None = None
    language: str | None = None
    intents: list[CreateIntent] | None = None
    entities: list[CreateEntity] | None = None
    dialog_nodes: list[CreateDialogNode] | None = None
    counterexamples: list[CreateCounterexample] | None = None
    metadata: dict[str, Any] | None = None
    learning_opt_out: bool | None = None


class UpdateWorkspace(CreateWorkspace):
    """New workspace content. Included elements fully replace existing ones."""


class Workspace(WatsonModel):
    workspace_id: str
    name: str
    language: str
    description: str | None = None
    metadata: dict[str, Any] | None = None
    learning_opt_out: bool | None = None
    created: datetime | None = None
    updated: datetime | None = None


class WorkspaceExport(Workspace):
    """Workspace with all its content (``export=true``)."""

    status: str | None = None
    intents: list[IntentExport] | None = None
    entities: list[EntityExport] | None = None
    dialog_nodes: list[DialogNode] | None = None
    counterexamples: list[Counterexample] | None = None


class WorkspaceCollection(Collection):
    workspaces: list[Workspace] = Field(default_factory=list)


# --- Logs ---


class LogExport(WatsonModel):
    """One logged message exchange."""

    log_id: str
    request: MessageRequest
    response: MessageResponse
    request_timestamp: str | None = None
    response_timestamp: str | None = None
    workspace_id: str | None = None
    language: str | None = None


class LogCollection(Collection):
    logs: list[LogExport] = Field(default_factory=list)
