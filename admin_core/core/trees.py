"""
Tree assembly helpers.

Every hierarchical payload in the backend (navigation routes, the role
menu picker, the admin menu tree, the directory tree and the department
tree) is built from flat ``parent_id``-linked rows by ``build_tree``.
"""

from collections import defaultdict
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, List, Optional, Set


def _get(row: Any, key: str, default: Any = None) -> Any:
    if isinstance(row, Mapping):
        return row.get(key, default)
    return getattr(row, key, default)


def _sort_value(value: Any) -> Any:
    return 0 if value is None else value


def _default_node(row: Any) -> Dict[str, Any]:
    if isinstance(row, Mapping):
        return dict(row)
    raise TypeError('build_tree needs a node callable for non-mapping rows')


def build_tree(rows: Iterable[Any],
               node: Optional[Callable[[Any], Optional[Dict[str, Any]]]] = None,
               parent_id: Any = 0,
               id_key: str = 'id',
               parent_key: str = 'parent_id',
               sort_key: Optional[str] = 'sort',
               children_key: str = 'children') -> List[Dict[str, Any]]:
    """
    Assemble a nested tree from flat rows.

    Args:
        rows: Mappings or model instances carrying ``id_key`` and ``parent_key``
        node: Renders one row into its output dict. Returning ``None`` drops
            the row together with its subtree
        parent_id: Parent value of the top level
        id_key: Attribute holding the row identifier
        parent_key: Attribute holding the parent identifier
        sort_key: Attribute siblings are ordered by before ``id_key``;
            ``None`` keeps the input order
        children_key: Key the non-empty child list is stored under

    Returns:
        List of top-level nodes. Rows whose parent is not reachable from
        ``parent_id`` do not appear.
    """
    render = node or _default_node
    grouped = defaultdict(list)
    for row in rows:
        parent = _get(row, parent_key)
        grouped[0 if parent is None else parent].append(row)

    if sort_key:
        for siblings in grouped.values():
            siblings.sort(key=lambda r: (_sort_value(_get(r, sort_key)), _get(r, id_key)))

    visited: Set[Any] = set()

    def _build(current_parent):
        branch = []
        for row in grouped.get(current_parent, ()):
            row_id = _get(row, id_key)
            if row_id in visited:
                continue
            visited.add(row_id)

            item = render(row)
            if item is None:
                continue
            children = _build(row_id)
            if children:
                item[children_key] = children
            branch.append(item)
        return branch

    return _build(parent_id)


def collect_descendant_ids(rows: Iterable[Any],
                           root_id: Any,
                           id_key: str = 'id',
                           parent_key: str = 'parent_id') -> Set[Any]:
    """Return the ids of every row below ``root_id``, excluding the root itself."""
    grouped = defaultdict(list)
    for row in rows:
        grouped[_get(row, parent_key)].append(_get(row, id_key))

    found: Set[Any] = set()
    pending = list(grouped.get(root_id, ()))
    while pending:
        current = pending.pop()
        if current in found or current == root_id:
            continue
        found.add(current)
        pending.extend(grouped.get(current, ()))
    return found


def compact(mapping: Mapping) -> Dict[str, Any]:
    """Drop keys whose value is ``None`` or an empty string. ``False`` and ``0`` survive."""
    return {
        key: value for key, value in mapping.items()
        if value is not None and value != ''
    }
