"""Watson Conversation V1 bindings."""

from clarety.conversation.models import Context as Context
from clarety.conversation.models import InputData as InputData
from clarety.conversation.models import MessageRequest as MessageRequest
from clarety.conversation.models import MessageResponse as MessageResponse
from clarety.conversation.service import DEFAULT_URL as DEFAULT_URL
from clarety.conversation.service import Conversation as Conversation
