"""
Flattening nested locale trees into dotted key paths and back
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence


def flatten_keys(tree: Dict[Any, Any], prefix: str = '') -> List[str]:
    """
    Flatten a nested mapping into dotted key paths

    Args:
        tree: Nested mapping (e.g. {'greeting': {'formal': 'Hello'}})
        prefix: Path prefix, including its trailing dot

    Returns:
        Key paths in mapping order (e.g. ['greeting.formal'])
    """
    keys: List[str] = []
    for key, value in tree.items():
        if isinstance(value, dict):
            keys.extend(flatten_keys(value, f"{prefix}{key}."))
        else:
            # Non-string leaves are opaque and still count as a key
            keys.append(f"{prefix}{key}")
    return keys


def split_key(key_path: str) -> List[str]:
    """Split a dotted key path into its segments"""
    return key_path.strip().split('.')


def dig(tree: Dict[Any, Any], segments: Sequence[str]) -> Optional[Any]:
    """Look up a nested value, returning None when any segment is missing"""
    node: Any = tree
    for segment in segments:
        if not isinstance(node, dict) or segment not in node:
            return None
        node = node[segment]
    return node


def add_value(tree: Dict[str, Any], segments: Sequence[str], value: Any) -> None:
    """
    Insert value at the nested path, creating intermediate mappings

    Existing intermediate mappings are descended into, not replaced.
    The final segment is always overwritten.
    """
    if not segments:
        raise ValueError("Cannot insert a value at an empty key path")

    node = tree
    for segment in segments[:-1]:
        child = node.get(segment)
        if not isinstance(child, dict):
            child = {}
            node[segment] = child
        node = child
    node[segments[-1]] = value


def build_tree(key_paths: Iterable[str], value_for: Callable[[str], Any]) -> Dict[str, Any]:
    """Build a nested tree from dotted key paths"""
    tree: Dict[str, Any] = {}
    for key_path in key_paths:
        add_value(tree, split_key(key_path), value_for(key_path))
    return tree
