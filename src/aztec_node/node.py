"""Batch execution of resource operations over host items."""

import logging
import threading
from typing import Any, Dict, Iterable, List, Mapping, Optional

from aztec_node.actions import execute_operation, parse_operation
from aztec_node.constants import LICENSING_NOTICE
from aztec_node.transport.client import AztecClient

logger = logging.getLogger(__name__)

_notice_lock = threading.Lock()
_notice_logged = False


def log_licensing_notice() -> bool:
    """
    Log the licensing notice once per process.

    Returns:
        bool: True if this call emitted the notice
    """
    global _notice_logged
    with _notice_lock:
        if _notice_logged:
            return False
        _notice_logged = True
    logger.warning(LICENSING_NOTICE)
    return True


class AztecNode:
    """
    Runs one resource operation for each input item.

    Each item carries the operation's camelCase parameters. Results come
    back in input order, each tagged with ``pairedItem`` pointing at the
    item that produced it.
    """

    def __init__(self, client: Optional[AztecClient] = None):
        self.client = client or AztecClient()

    def execute(
        self,
        resource: str,
        operation: str,
        items: Iterable[Optional[Mapping[str, Any]]],
        continue_on_fail: bool = False,
    ) -> List[Dict[str, Any]]:
        """
        Execute ``resource.operation`` once per item.

        Args:
            resource: Resource name
            operation: Operation name
            items: Parameter mappings, one per execution
            continue_on_fail: Record ``{"error": message}`` for a failing
                item instead of raising

        Returns:
            list: One output per item (or several when the operation
            returns a list)

        Raises:
            AztecNodeException: On the first failure unless continue_on_fail
        """
        log_licensing_notice()

        results: List[Dict[str, Any]] = []
        for index, item in enumerate(items):
            try:
                params = parse_operation(resource, operation, item)
                response = execute_operation(self.client, resource, params)
            except Exception as e:
                if not continue_on_fail:
                    raise
                logger.warning(f"{resource}.{operation} failed for item {index}: {e}")
                results.append({"json": {"error": str(e)}, "pairedItem": {"item": index}})
                continue

            outputs = response if isinstance(response, list) else [response]
            for output in outputs:
                results.append({"json": output, "pairedItem": {"item": index}})
        return results
