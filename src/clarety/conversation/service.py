"""Conversation V1 service: one method per REST operation.

Every method is a thin call to RestClient.invoke with a descriptor from
clarety.conversation.endpoints. None means "omit" for every optional argument.
"""

from clarety.conversation import endpoints as ep
from clarety.conversation.models import (
    Counterexample,
    CounterexampleCollection,
    CreateCounterexample,
    CreateDialogNode,
    CreateEntity,
    CreateExample,
    CreateIntent,
    CreateSynonym,
    CreateValue,
    CreateWorkspace,
    DialogNode,
    DialogNodeCollection,
    Entity,
    EntityCollection,
    EntityExport,
    Example,
    ExampleCollection,
    Intent,
    IntentCollection,
    IntentExport,
    LogCollection,
    MessageRequest,
    MessageResponse,
    Synonym,
    SynonymCollection,
    UpdateCounterexample,
    UpdateDialogNode,
    UpdateEntity,
    UpdateExample,
    UpdateIntent,
    UpdateSynonym,
    UpdateValue,
    UpdateWorkspace,
    Value,
    ValueCollection,
    ValueExport,
    Workspace,
    WorkspaceCollection,
    WorkspaceExport,
)
from clarety.watson.request import QueryValue
from clarety.watson.result import Result
from clarety.watson.service import WatsonService

DEFAULT_URL = "https://gateway.watsonplatform.net/conversation/api"


def _paging(
    page_limit: int | None, include_count: bool | None, sort: str | None, cursor: str | None
) -> dict[str, QueryValue]:
    return {"page_limit": page_limit, "include_count": include_count, "sort": sort, "cursor": cursor}


class Conversation(WatsonService):
    """Client for the Watson Conversation V1 API.

    Build it with a versioned RestClient; the version pins the API revision.
    """

    # --- Workspaces ---

    async def list_workspaces(
        self,
        *,
        page_limit: int | None = None,
        include_count: bool | None = None,
        sort: str | None = None,
        cursor: str | None = None,
    ) -> Result[WorkspaceCollection]:
        """List the workspaces of this service instance."""
        return await self._client.invoke(ep.LIST_WORKSPACES, query=_paging(page_limit, include_count, sort, cursor))

    async def create_workspace(self, properties: CreateWorkspace | None = None) -> Result[Workspace]:
        """Create a workspace, optionally with intents, entities, and dialog nodes."""
        return await self._client.invoke(ep.CREATE_WORKSPACE, body=properties)

    async def get_workspace(self, workspace_id: str, *, export: bool | None = None) -> Result[WorkspaceExport]:
        """Get a workspace; ``export=True`` includes all its content."""
        return await self._client.invoke(ep.GET_WORKSPACE, path_params={"workspace_id": workspace_id}, query={"export": export})

    async def update_workspace(self, workspace_id: str, properties: UpdateWorkspace | None = None) -> Result[Workspace]:
        """Update a workspace. Included elements completely replace existing ones."""
        return await self._client.invoke(ep.UPDATE_WORKSPACE, path_params={"workspace_id": workspace_id}, body=properties)

    async def delete_workspace(self, workspace_id: str) -> Result[None]:
        """Delete a workspace and everything in it."""
        return await self._client.invoke(ep.DELETE_WORKSPACE, path_params={"workspace_id": workspace_id})

    # --- Message ---

    async def message(self, workspace_id: str, request: MessageRequest | None = None) -> Result[MessageResponse]:
        """Get the bot's response to user input.

        Pass the ``context`` from the previous response in ``request`` to continue a conversation.
        """
        return await self._client.invoke(ep.MESSAGE, path_params={"workspace_id": workspace_id}, body=request)

    # --- Intents ---

    async def list_intents(
        self,
        workspace_id: str,
        *,
        export: bool | None = None,
        page_limit: int | None = None,
        include_count: bool | None = None,
        sort: str | None = None,
        cursor: str | None = None,
    ) -> Result[IntentCollection]:
        """List the intents of a workspace; ``export=True`` includes their examples."""
        query = {"export": export, **_paging(page_limit, include_count, sort, cursor)}
        return await self._client.invoke(ep.LIST_INTENTS, path_params={"workspace_id": workspace_id}, query=query)

    async def create_intent(
        self,
        workspace_id: str,
        intent: str,
        *,
        description: str | None = None,
        examples: list[CreateExample] | None = None,
    ) -> Result[Intent]:
        """Create an intent, optionally with examples."""
        body = CreateIntent(intent=intent, description=description, examples=examples)
        return await self._client.invoke(ep.CREATE_INTENT, path_params={"workspace_id": workspace_id}, body=body)

    async def get_intent(self, workspace_id: str, intent: str, *, export: bool | None = None) -> Result[IntentExport]:
        """Get an intent; ``export=True`` includes its examples."""
        path = {"workspace_id": workspace_id, "intent": intent}
        return await self._client.invoke(ep.GET_INTENT, path_params=path, query={"export": export})

    async def update_intent(
        self,
        workspace_id: str,
        intent: str,
        *,
        new_intent: str | None = None,
        new_description: str | None = None,
        new_examples: list[CreateExample] | None = None,
    ) -> Result[Intent]:
        """Rename or redescribe an intent, or replace its examples."""
        body = UpdateIntent(intent=new_intent, description=new_description, examples=new_examples)
        path = {"workspace_id": workspace_id, "intent": intent}
        return await self._client.invoke(ep.UPDATE_INTENT, path_params=path, body=body)

    async def delete_intent(self, workspace_id: str, intent: str) -> Result[None]:
        """Delete an intent and its examples."""
        return await self._client.invoke(ep.DELETE_INTENT, path_params={"workspace_id": workspace_id, "intent": intent})

    # --- Examples ---

    async def list_examples(
        self,
        workspace_id: str,
        intent: str,
        *,
        page_limit: int | None = None,
        include_count: bool | None = None,
        sort: str | None = None,
        cursor: str | None = None,
    ) -> Result[ExampleCollection]:
        """List the user input examples of an intent."""
        path = {"workspace_id": workspace_id, "intent": intent}
        return await self._client.invoke(ep.LIST_EXAMPLES, path_params=path, query=_paging(page_limit, include_count, sort, cursor))

    async def create_example(self, workspace_id: str, intent: str, text: str) -> Result[Example]:
        """Add a user input example to an intent."""
        path = {"workspace_id": workspace_id, "intent": intent}
        return await self._client.invoke(ep.CREATE_EXAMPLE, path_params=path, body=CreateExample(text=text))

    async def get_example(self, workspace_id: str, intent: str, text: str) -> Result[Example]:
        """Get one example of an intent."""
        path = {"workspace_id": workspace_id, "intent": intent, "text": text}
        return await self._client.invoke(ep.GET_EXAMPLE, path_params=path)

    async def update_example(self, workspace_id: str, intent: str, text: str, *, new_text: str | None = None) -> Result[Example]:
        """Change the text of an example."""
        path = {"workspace_id": workspace_id, "intent": intent, "text": text}
        return await self._client.invoke(ep.UPDATE_EXAMPLE, path_params=path, body=UpdateExample(text=new_text))

    async def delete_example(self, workspace_id: str, intent: str, text: str) -> Result[None]:
        """Remove an example from an intent."""
        path = {"workspace_id": workspace_id, "intent": intent, "text": text}
        return await self._client.invoke(ep.DELETE_EXAMPLE, path_params=path)

    # --- Entities ---

    async def list_entities(
        self,
        workspace_id: str,
        *,
        export: bool | None = None,
        page_limit: int | None = None,
        include_count: bool | None = None,
        sort: str | None = None,
        cursor: str | None = None,
    ) -> Result[EntityCollection]:
        """List the entities of a workspace; ``export=True`` includes their values."""
        query = {"export": export, **_paging(page_limit, include_count, sort, cursor)}
        return await self._client.invoke(ep.LIST_ENTITIES, path_params={"workspace_id": workspace_id}, query=query)

    async def create_entity(self, workspace_id: str, properties: CreateEntity) -> Result[Entity]:
        """Create an entity, optionally with values."""
        return await self._client.invoke(ep.CREATE_ENTITY, path_params={"workspace_id": workspace_id}, body=properties)

    async def get_entity(self, workspace_id: str, entity: str, *, export: bool | None = None) -> Result[EntityExport]:
        """Get an entity; ``export=True`` includes its values."""
        path = {"workspace_id": workspace_id, "entity": entity}
        return await self._client.invoke(ep.GET_ENTITY, path_params=path, query={"export": export})

    async def update_entity(self, workspace_id: str, entity: str, properties: UpdateEntity) -> Result[Entity]:
        """Update an entity. Included values replace the existing ones."""
        path = {"workspace_id": workspace_id, "entity": entity}
        return await self._client.invoke(ep.UPDATE_ENTITY, path_params=path, body=properties)

    async def delete_entity(self, workspace_id: str, entity: str) -> Result[None]:
        """Delete an entity and its values."""
        return await self._client.invoke(ep.DELETE_ENTITY, path_params={"workspace_id": workspace_id, "entity": entity})

    # --- Entity values ---

    async def list_values(
        self,
        workspace_id: str,
        entity: str,
        *,
        export: bool | None = None,
        page_limit: int | None = None,
        include_count: bool | None = None,
        sort: str | None = None,
        cursor: str | None = None,
    ) -> Result[ValueCollection]:
        """List the values of an entity; ``export=True`` includes their synonyms."""
        path = {"workspace_id": workspace_id, "entity": entity}
        query = {"export": export, **_paging(page_limit, include_count, sort, cursor)}
        return await self._client.invoke(ep.LIST_VALUES, path_params=path, query=query)

    async def create_value(self, workspace_id: str, entity: str, properties: CreateValue) -> Result[Value]:
        """Add a value to an entity."""
        path = {"workspace_id": workspace_id, "entity": entity}
        return await self._client.invoke(ep.CREATE_VALUE, path_params=path, body=properties)

    async def get_value(self, workspace_id: str, entity: str, value: str, *, export: bool | None = None) -> Result[ValueExport]:
        """Get an entity value; ``export=True`` includes its synonyms."""
        path = {"workspace_id": workspace_id, "entity": entity, "value": value}
        return await self._client.invoke(ep.GET_VALUE, path_params=path, query={"export": export})

    async def update_value(self, workspace_id: str, entity: str, value: str, properties: UpdateValue) -> Result[Value]:
        """Update an entity value. Included synonyms replace the existing ones."""
        path = {"workspace_id": workspace_id, "entity": entity, "value": value}
        return await self._client.invoke(ep.UPDATE_VALUE, path_params=path, body=properties)

    async def delete_value(self, workspace_id: str, entity: str, value: str) -> Result[None]:
        """Remove a value from an entity."""
        path = {"workspace_id": workspace_id, "entity": entity, "value": value}
        return await self._client.invoke(ep.DELETE_VALUE, path_params=path)

    # --- Synonyms ---

    async def list_synonyms(
        self,
        workspace_id: str,
        entity: str,
        value: str,
        *,
        page_limit: int | None = None,
        include_count: bool | None = None,
        sort: str | None = None,
        cursor: str | None = None,
    ) -> Result[SynonymCollection]:
        """List the synonyms of an entity value."""
        path = {"workspace_id": workspace_id, "entity": entity, "value": value}
        return await self._client.invoke(ep.LIST_SYNONYMS, path_params=path, query=_paging(page_limit, include_count, sort, cursor))

    async def create_synonym(self, workspace_id: str, entity: str, value: str, synonym: str) -> Result[Synonym]:
        """Add a synonym to an entity value."""
        path = {"workspace_id": workspace_id, "entity": entity, "value": value}
        return await self._client.invoke(ep.CREATE_SYNONYM, path_params=path, body=CreateSynonym(synonym=synonym))

    async def get_synonym(self, workspace_id: str, entity: str, value: str, synonym: str) -> Result[Synonym]:
        """Get one synonym of an entity value."""
        path = {"workspace_id": workspace_id, "entity": entity, "value": value, "synonym": synonym}
        return await self._client.invoke(ep.GET_SYNONYM, path_params=path)

    async def update_synonym(
        self, workspace_id: str, entity: str, value: str, synonym: str, *, new_synonym: str | None = None
    ) -> Result[Synonym]:
        """Change the text of a synonym."""
        path = {"workspace_id": workspace_id, "entity": entity, "value": value, "synonym": synonym}
        return await self._client.invoke(ep.UPDATE_SYNONYM, path_params=path, body=UpdateSynonym(synonym=new_synonym))

    async def delete_synonym(self, workspace_id: str, entity: str, value: str, synonym: str) -> Result[None]:
        """Remove a synonym from an entity value."""
        path = {"workspace_id": workspace_id, "entity": entity, "value": value, "synonym": synonym}
        return await self._client.invoke(ep.DELETE_SYNONYM, path_params=path)

    # --- Dialog nodes ---

    async def list_dialog_nodes(
        self,
        workspace_id: str,
        *,
        page_limit: int | None = None,
        include_count: bool | None = None,
        sort: str | None = None,
        cursor: str | None = None,
    ) -> Result[DialogNodeCollection]:
        """List the dialog nodes of a workspace."""
        return await self._client.invoke(
            ep.LIST_DIALOG_NODES,
            path_params={"workspace_id": workspace_id},
            query=_paging(page_limit, include_count, sort, cursor),
        )

    async def create_dialog_node(self, workspace_id: str, properties: CreateDialogNode) -> Result[DialogNode]:
        """Create a dialog node."""
        return await self._client.invoke(ep.CREATE_DIALOG_NODE, path_params={"workspace_id": workspace_id}, body=properties)

    async def get_dialog_node(self, workspace_id: str, dialog_node: str) -> Result[DialogNode]:
        """Get one dialog node."""
        path = {"workspace_id": workspace_id, "dialog_node": dialog_node}
        return await self._client.invoke(ep.GET_DIALOG_NODE, path_params=path)

    async def update_dialog_node(self, workspace_id: str, dialog_node: str, properties: UpdateDialogNode) -> Result[DialogNode]:
        """Update a dialog node; ``dialog_node`` in the properties renames it."""
        path = {"workspace_id": workspace_id, "dialog_node": dialog_node}
        return await self._client.invoke(ep.UPDATE_DIALOG_NODE, path_params=path, body=properties)

    async def delete_dialog_node(self, workspace_id: str, dialog_node: str) -> Result[None]:
        """Delete a dialog node."""
        path = {"workspace_id": workspace_id, "dialog_node": dialog_node}
        return await self._client.invoke(ep.DELETE_DIALOG_NODE, path_params=path)

    # --- Logs ---

    async def list_logs(
        self,
        workspace_id: str,
        *,
        sort: str | None = None,
        filter_: str | None = None,
        page_limit: int | None = None,
        cursor: str | None = None,
    ) -> Result[LogCollection]:
        """List logged message exchanges, optionally narrowed by a filter expression."""
        query: dict[str, QueryValue] = {"sort": sort, "filter": filter_, "page_limit": page_limit, "cursor": cursor}
        return await self._client.invoke(ep.LIST_LOGS, path_params={"workspace_id": workspace_id}, query=query)

    # --- Counterexamples ---

    async def list_counterexamples(
        self,
        workspace_id: str,
        *,
        page_limit: int | None = None,
        include_count: bool | None = None,
        sort: str | None = None,
        cursor: str | None = None,
    ) -> Result[CounterexampleCollection]:
        """List the counterexamples of a workspace."""
        return await self._client.invoke(
            ep.LIST_COUNTEREXAMPLES,
            path_params={"workspace_id": workspace_id},
            query=_paging(page_limit, include_count, sort, cursor),
        )

    async def create_counterexample(self, workspace_id: str, text: str) -> Result[Counterexample]:
        """Mark a user input as irrelevant."""
        return await self._client.invoke(
            ep.CREATE_COUNTEREXAMPLE, path_params={"workspace_id": workspace_id}, body=CreateCounterexample(text=text)
        )

    async def get_counterexample(self, workspace_id: str, text: str) -> Result[Counterexample]:
        """Get one counterexample."""
        return await self._client.invoke(ep.GET_COUNTEREXAMPLE, path_params={"workspace_id": workspace_id, "text": text})

    async def update_counterexample(self, workspace_id: str, text: str, *, new_text: str | None = None) -> Result[Counterexample]:
        """Change the text of a counterexample."""
        path = {"workspace_id": workspace_id, "text": text}
        return await self._client.invoke(ep.UPDATE_COUNTEREXAMPLE, path_params=path, body=UpdateCounterexample(text=new_text))

    async def delete_counterexample(self, workspace_id: str, text: str) -> Result[None]:
        """Delete a counterexample."""
        return await self._client.invoke(ep.DELETE_COUNTEREXAMPLE, path_params={"workspace_id": workspace_id, "text": text})
