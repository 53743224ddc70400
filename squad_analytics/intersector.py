"""
Shared-match computation across a roster.
"""

from typing import List, Sequence

from squad_analytics.errors import InvalidInput


def intersect_match_ids(match_id_lists: Sequence[Sequence[str]]) -> List[str]:
    """
    Match ids present in every list, in the order of the first list.

    Args:
        match_id_lists: One recent-match list per roster player

    Returns:
        Shared match ids. A single list is returned unchanged; with two or
        more lists, duplicates in the first list are kept once

    Raises:
        InvalidInput: match_id_lists is empty
    """
    if not match_id_lists:
        raise InvalidInput("Cannot intersect matches of an empty roster")
    if len(match_id_lists) == 1:
        return list(match_id_lists[0])

    others = [set(ids) for ids in match_id_lists[1:]]
    # dict.fromkeys keeps first-seen order
    return [
        match_id for match_id in dict.fromkeys(match_id_lists[0])
        if all(match_id in ids for ids in others)
    ]
