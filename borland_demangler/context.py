#!/usr/bin/python
import logging

from .DemanglerConfig import DemanglerConfig

LOGGER = logging.getLogger(__name__)


def _qualsKey(quals):
    if quals is None:
        return (False, False)
    return (quals.isVolatile(), quals.isConst())


class Context(object):
    """
    Interning tables for a single demangling run.
    Structurally identical names and types are shared instead of being created again,
    child nodes are compared by identity. A Context must not be shared between runs.
    """

    CACHES = [
        "names",
        "nested_names",
        "built_in_types",
        "integral_types",
        "char_types",
        "float_types",
        "named_types",
        "pointer_types",
        "reference_types",
        "rreference_types",
        "arrays",
    ]

    def __init__(self, config=None):
        if config is None:
            config = DemanglerConfig()
        self.config = config
        self._caches = {cache_name: {} for cache_name in self.CACHES}
        self._statistics = {cache_name: {"hits": 0, "misses": 0} for cache_name in self.CACHES}

    def _get(self, cache_name, key):
        node = self._caches[cache_name].get(key)
        if self.config.TRACK_STATISTICS:
            self._statistics[cache_name]["hits" if node is not None else "misses"] += 1
        if node is not None:
            LOGGER.debug("%s: reusing interned node for %r", cache_name, key)
        return node

    def _add(self, cache_name, key, node):
        LOGGER.debug("%s: interning new node %r", cache_name, node)
        self._caches[cache_name][key] = node

    def getName(self, name):
        return self._get("names", name)

    def addName(self, node):
        self._add("names", node.name(), node)

    def getNestedName(self, super_node, name):
        return self._get("nested_names", (super_node, name))

    def addNestedName(self, node):
        self._add("nested_names", (node.super(), node.name()), node)

    def getBuiltInType(self, type_name, quals):
        return self._get("built_in_types", (type_name, _qualsKey(quals)))

    def addBuiltInType(self, node):
        self._add("built_in_types", (node.typeName(), _qualsKey(node.quals())), node)

    def getIntegralType(self, type_name, is_unsigned, quals):
        return self._get("integral_types", (type_name, is_unsigned, _qualsKey(quals)))

    def addIntegralType(self, node):
        self._add("integral_types", (node.typeName(), node.isUnsigned(), _qualsKey(node.quals())), node)

    def getCharType(self, signedness, quals):
        return self._get("char_types", (signedness, _qualsKey(quals)))

    def addCharType(self, node):
        self._add("char_types", (node.signedness(), _qualsKey(node.quals())), node)

    def getFloatType(self, size, quals):
        return self._get("float_types", (size, _qualsKey(quals)))

    def addFloatType(self, node):
        self._add("float_types", (node.size(), _qualsKey(node.quals())), node)

    def getNamedType(self, type_name, quals):
        return self._get("named_types", (type_name, _qualsKey(quals)))

    def addNamedType(self, node):
        self._add("named_types", (node.name(), _qualsKey(node.quals())), node)

    def getPointerType(self, pointee, quals):
        return self._get("pointer_types", (pointee, _qualsKey(quals)))

    def addPointerType(self, node):
        self._add("pointer_types", (node.pointee(), _qualsKey(node.quals())), node)

    def getReferenceType(self, pointee):
        return self._get("reference_types", pointee)

    def addReferenceType(self, node):
        self._add("reference_types", node.pointee(), node)

    def getRReferenceType(self, pointee):
        return self._get("rreference_types", pointee)

    def addRReferenceType(self, node):
        self._add("rreference_types", node.pointee(), node)

    def getArray(self, pointee, size, quals):
        return self._get("arrays", (pointee, size, _qualsKey(quals)))

    def addArray(self, node):
        self._add("arrays", (node.pointee(), node.size(), _qualsKey(node.quals())), node)

    def size(self):
        return sum(len(cache) for cache in self._caches.values())

    def getStatistics(self):
        statistics = {}
        for cache_name in self.CACHES:
            statistics[cache_name] = {"size": len(self._caches[cache_name])}
            if self.config.TRACK_STATISTICS:
                statistics[cache_name].update(self._statistics[cache_name])
        return statistics
