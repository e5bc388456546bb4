"""Message catalog models for the i18n system.

Defines the parsed message key and the catalog of nested message trees.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

# A message tree maps entry names to strings or to further message trees.
MessageTree = Dict[str, Any]


def merge_trees(target: MessageTree, source: Mapping[str, Any]) -> MessageTree:
    """Merge a message tree into another in place, recursing into subtrees.

    Strings and other leaves in source replace those in target.

    Args:
        target: Tree receiving the entries.
        source: Tree whose entries are merged in.

    Returns:
        The target tree.
    """
    for name, value in source.items():
        current = target.get(name)
        if isinstance(value, Mapping) and isinstance(current, dict):
            merge_trees(current, value)
        elif isinstance(value, Mapping):
            target[name] = merge_trees({}, value)
        else:
            target[name] = value
    return target


@dataclass(frozen=True)
class MessageKey:
    """Parsed form of a dot-separated message key.

    The first segment names the namespace, the remaining segments are a path
    into that namespace's message tree. Frozen for hashability.

    Attributes:
        namespace: First key segment (e.g., "validation").
        entries: Remaining segments (e.g., ("between", "numeric")).
    """

    namespace: str
    entries: Tuple[str, ...] = ()

    def __str__(self) -> str:
        """Return the full dot-separated key.

        Returns:
            Full key (e.g., "validation.between.numeric").
        """
        return ".".join((self.namespace,) + self.entries)

    @classmethod
    def from_string(cls, key_string: str) -> "MessageKey":
        """Create a MessageKey from a dot-separated string.

        Splitting never fails: "validation" parses to a key with no entries
        and empty segments are kept as they are.

        Args:
            key_string: Dot-separated key (e.g., "slackin.placeholders.email").

        Returns:
            MessageKey instance.
        """
        segments = key_string.split(".")
        return cls(namespace=segments[0], entries=tuple(segments[1:]))

    def source(self, locale: str) -> str:
        """Return the catalog source key for this key in a locale.

        Args:
            locale: Locale identifier (e.g., "pt-br").

        Returns:
            Source key (e.g., "pt-br.validation").
        """
        return f"{locale}.{self.namespace}"


@dataclass
class MessageCatalog:
    """All loaded message trees, keyed by "<locale>.<namespace>" source keys.

    Attributes:
        sources: Mapping of source key to message tree.
    """

    sources: Dict[str, MessageTree] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, messages: Optional[Mapping[str, Any]]) -> "MessageCatalog":
        """Wrap a plain mapping without copying or validating it.

        Args:
            messages: Mapping of source key to message tree, or None.

        Returns:
            MessageCatalog holding the given mapping.
        """
        if isinstance(messages, MessageCatalog):
            return messages
        return cls(sources=messages if messages is not None else {})

    def lookup(self, key: MessageKey, locale: str) -> Optional[str]:
        """Resolve a message key to its string leaf.

        Walks the tree one entry at a time. Stepping into anything that is not
        a mapping, or into a missing entry, ends the walk as not found, which
        includes stepping past an empty string with entries remaining.

        Args:
            key: Parsed message key.
            locale: Locale the source key is built from.

        Returns:
            The message string, or None if not found.
        """
        if not isinstance(self.sources, Mapping):
            return None

        source = key.source(locale)
        if source not in self.sources:
            return None

        node: Any = self.sources[source]
        for entry in key.entries:
            if not isinstance(node, Mapping) or entry not in node:
                return None
            node = node[entry]

        if not isinstance(node, str):
            return None
        return node

    def merge(self, other: "MessageCatalog") -> None:
        """Merge another catalog into this one.

        Message trees are merged recursively, later strings override earlier
        ones.

        Args:
            other: MessageCatalog to merge.
        """
        for source, tree in other.sources.items():
            merge_trees(self.sources.setdefault(source, {}), tree)

    @property
    def locales(self) -> list:
        """Locales present in the catalog, in first-seen order."""
        found: list = []
        if not isinstance(self.sources, Mapping):
            return found
        for source in self.sources:
            locale = source.split(".", 1)[0]
            if locale not in found:
                found.append(locale)
        return found

    def namespaces(self, locale: str) -> list:
        """Namespaces loaded for a locale.

        Args:
            locale: Locale identifier.

        Returns:
            List of namespace names.
        """
        if not isinstance(self.sources, Mapping):
            return []
        prefix = f"{locale}."
        return [
            source[len(prefix) :] for source in self.sources if source.startswith(prefix)
        ]

    def __len__(self) -> int:
        return len(self.sources) if isinstance(self.sources, Mapping) else 0

    def __iter__(self) -> Iterator[str]:
        return iter(self.sources if isinstance(self.sources, Mapping) else ())
