"""Conversation V1 operation table."""

from clarety.conversation import models as m
from clarety.watson.endpoint import delete, get, post

PAGING = ("page_limit", "include_count", "sort", "cursor")

WORKSPACES = "/v1/workspaces"
WORKSPACE = WORKSPACES + "/{workspace_id}"
INTENTS = WORKSPACE + "/intents"
INTENT = INTENTS + "/{intent}"
EXAMPLES = INTENT + "/examples"
EXAMPLE = EXAMPLES + "/{text}"
ENTITIES = WORKSPACE + "/entities"
ENTITY = ENTITIES + "/{entity}"
VALUES = ENTITY + "/values"
VALUE = VALUES + "/{value}"
SYNONYMS = VALUE + "/synonyms"
SYNONYM = SYNONYMS + "/{synonym}"
DIALOG_NODES = WORKSPACE + "/dialog_nodes"
DIALOG_NODE = DIALOG_NODES + "/{dialog_node}"
COUNTEREXAMPLES = WORKSPACE + "/counterexamples"
COUNTEREXAMPLE = COUNTEREXAMPLES + "/{text}"

# Workspaces
LIST_WORKSPACES = get(WORKSPACES, m.WorkspaceCollection, *PAGING, name="list_workspaces")
CREATE_WORKSPACE = post(WORKSPACES, m.Workspace, name="create_workspace")
GET_WORKSPACE = get(WORKSPACE, m.WorkspaceExport, "export", name="get_workspace")
UPDATE_WORKSPACE = post(WORKSPACE, m.Workspace, name="update_workspace")
DELETE_WORKSPACE = delete(WORKSPACE, name="delete_workspace")

# Message
MESSAGE = post(WORKSPACE + "/message", m.MessageResponse, name="message")

# Intents
LIST_INTENTS = get(INTENTS, m.IntentCollection, "export", *PAGING, name="list_intents")
CREATE_INTENT = post(INTENTS, m.Intent, name="create_intent")
GET_INTENT = get(INTENT, m.IntentExport, "export", name="get_intent")
UPDATE_INTENT = post(INTENT, m.Intent, name="update_intent")
DELETE_INTENT = delete(INTENT, name="delete_intent")

# Examples
LIST_EXAMPLES = get(EXAMPLES, m.ExampleCollection, *PAGING, name="list_examples")
CREATE_EXAMPLE = post(EXAMPLES, m.Example, name="create_example")
GET_EXAMPLE = get(EXAMPLE, m.Example, name="get_example")
UPDATE_EXAMPLE = post(EXAMPLE, m.Example, name="update_example")
DELETE_EXAMPLE = delete(EXAMPLE, name="delete_example")

# Entities
LIST_ENTITIES = get(ENTITIES, m.EntityCollection, "export", *PAGING, name="list_entities")
CREATE_ENTITY = post(ENTITIES, m.Entity, name="create_entity")
GET_ENTITY = get(ENTITY, m.EntityExport, "export", name="get_entity")
UPDATE_ENTITY = post(ENTITY, m.Entity, name="update_entity")
DELETE_ENTITY = delete(ENTITY, name="delete_entity")

# Entity values
LIST_VALUES = get(VALUES, m.ValueCollection, "export", *PAGING, name="list_values")
CREATE_VALUE = post(VALUES, m.Value, name="create_value")
GET_VALUE = get(VALUE, m.ValueExport, "export", name="get_value")
UPDATE_VALUE = post(VALUE, m.Value, name="update_value")
DELETE_VALUE = delete(VALUE, name="delete_value")

# Synonyms
LIST_SYNONYMS = get(SYNONYMS, m.SynonymCollection, *PAGING, name="list_synonyms")
CREATE_SYNONYM = post(SYNONYMS, m.Synonym, name="create_synonym")
GET_SYNONYM = get(SYNONYM, m.Synonym, name="get_synonym")
UPDATE_SYNONYM = post(SYNONYM, m.Synonym, name="update_synonym")
DELETE_SYNONYM = delete(SYNONYM, name="delete_synonym")

# Dialog nodes
LIST_DIALOG_NODES = get(DIALOG_NODES, m.DialogNodeCollection, *PAGING, name="list_dialog_nodes")
CREATE_DIALOG_NODE = post(DIALOG_NODES, m.DialogNode, name="create_dialog_node")
GET_DIALOG_NODE = get(DIALOG_NODE, m.DialogNode, name="get_dialog_node")
UPDATE_DIALOG_NODE = post(DIALOG_NODE, m.DialogNode, name="update_dialog_node")
DELETE_DIALOG_NODE = delete(DIALOG_NODE, name="delete_dialog_node")

# Logs
LIST_LOGS = get(WORKSPACE + "/logs", m.LogCollection, "sort", "filter", "page_limit", "cursor", name="list_logs")

# Counterexamples
LIST_COUNTEREXAMPLES = get(COUNTEREXAMPLES, m.CounterexampleCollection, *PAGING, name="list_counterexamples")
CREATE_COUNTEREXAMPLE = post(COUNTEREXAMPLES, m.Counterexample, name="create_counterexample")
GET_COUNTEREXAMPLE = get(COUNTEREXAMPLE, m.Counterexample, name="get_counterexample")
UPDATE_COUNTEREXAMPLE = post(COUNTEREXAMPLE, m.Counterexample, name="update_counterexample")
DELETE_COUNTEREXAMPLE = delete(COUNTEREXAMPLE, name="delete_counterexample")
