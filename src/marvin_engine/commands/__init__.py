"""Command set, registry, and the dispatcher hosts call into."""

from .models import CommandHandler, CommandId, CommandRef
from .registry import CommandRegistry, RegistryStats
from .defaults import DEFAULT_COMMANDS, load_default_commands
from .dispatcher import CommandDispatcher, Completion

__all__ = [
    "CommandHandler",
    "CommandId",
    "CommandRef",
    "CommandRegistry",
    "RegistryStats",
    "DEFAULT_COMMANDS",
    "load_default_commands",
    "CommandDispatcher",
    "Completion",
]
