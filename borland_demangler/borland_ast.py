from enum import Enum
from io import StringIO
from typing import Optional


class Kind(Enum):
    NAME = 0
    NESTED_NAME = 1
    NODE_ARRAY = 2
    TEMPLATE_NODE = 3
    FUNCTION = 4
    CONVERSION_OPERATOR = 5
    CALL_CONV = 6
    OPERATOR = 7
    BUILT_IN_TYPE = 8
    INTEGRAL_TYPE = 9
    CHAR_TYPE = 10
    FLOAT_TYPE = 11
    NAMED_TYPE = 12
    POINTER_TYPE = 13
    REFERENCE_TYPE = 14
    RREFERENCE_TYPE = 15
    ARRAY_NODE = 16
    FUNCTION_TYPE = 17


class Node(object):
    """
    Base of the demangled syntax tree.
    C++ declarators wrap around the declared name, so every node prints the text
    preceding an embedded name (printLeft) separately from the text following it (printRight).
    """

    def __init__(self, kind: Kind, has_right: bool = False):
        self._kind = kind
        self._has_right = has_right

    def print(self, s):
        self.printLeft(s)
        if self._has_right:
            self.printRight(s)

    def str(self) -> str:
        buffer = StringIO()
        self.print(buffer)
        return buffer.getvalue()

    def kind(self) -> Kind:
        return self._kind

    def hasRight(self) -> bool:
        return self._has_right

    def printLeft(self, s):
        raise NotImplementedError

    def printRight(self, s):
        """Some nodes need trailing characters after the embedded name"""
        pass

    def __str__(self):
        return self.str()

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.str()!r}>"


class NameNode(Node):

    def __init__(self, name: str):
        super().__init__(Kind.NAME)
        self._name = name

    @classmethod
    def create(cls, context, name: str) -> "NameNode":
        cached = context.getName(name)
        if cached is not None:
            return cached
        new_name = cls(name)
        context.addName(new_name)
        return new_name

    def name(self) -> str:
        return self._name

    def printLeft(self, s):
        s.write(self._name)


class NestedNameNode(Node):

    def __init__(self, super_node: Node, name: Node):
        super().__init__(Kind.NESTED_NAME)
        self._super = super_node
        self._name = name

    @classmethod
    def create(cls, context, super_node: Node, name: Node) -> "NestedNameNode":
        """Interned on the identity of both children, so equal scopes built twice share one instance"""
        cached = context.getNestedName(super_node, name)
        if cached is not None:
            return cached
        new_name = cls(super_node, name)
        context.addNestedName(new_name)
        return new_name

    def super(self) -> Node:
        return self._super

    def name(self) -> Node:
        return self._name

    def printLeft(self, s):
        self._super.print(s)
        s.write("::")
        self._name.print(s)


class NodeArray(Node):
    """Parameter and template argument lists, appended to while the parser assembles the tree"""

    def __init__(self):
        super().__init__(Kind.NODE_ARRAY)
        self._nodes = []

    @classmethod
    def create(cls) -> "NodeArray":
        return cls()

    def addNode(self, node: Node):
        self._nodes.append(node)

    def empty(self) -> bool:
        return not self._nodes

    def size(self) -> int:
        return len(self._nodes)

    def get(self, index: int) -> Optional[Node]:
        if 0 <= index < len(self._nodes):
            return self._nodes[index]
        return None

    def __iter__(self):
        return iter(self._nodes)

    def __len__(self):
        return len(self._nodes)

    def printLeft(self, s):
        for index, node in enumerate(self._nodes):
            if index:
                s.write(", ")
            node.print(s)


class Qualifiers(object):
    """const/volatile pair, always rendered volatile before const"""

    def __init__(self, is_volatile: bool = False, is_const: bool = False):
        self._is_volatile = is_volatile
        self._is_const = is_const

    def isVolatile(self) -> bool:
        return self._is_volatile

    def isConst(self) -> bool:
        return self._is_const

    def printSpaceL(self, s):
        if self._is_volatile:
            s.write(" volatile")
        if self._is_const:
            s.write(" const")

    def printSpaceR(self, s):
        if self._is_volatile:
            s.write("volatile ")
        if self._is_const:
            s.write("const ")

    def __eq__(self, other):
        if not isinstance(other, Qualifiers):
            return NotImplemented
        return self._is_volatile == other._is_volatile and self._is_const == other._is_const

    def __hash__(self):
        return hash((self._is_volatile, self._is_const))

    def __repr__(self):
        return f"Qualifiers(is_volatile={self._is_volatile}, is_const={self._is_const})"


class TemplateNode(Node):

    def __init__(self, name: Node, params: Optional[Node]):
        super().__init__(Kind.TEMPLATE_NODE)
        self._name = name
        self._params = params

    @classmethod
    def create(cls, name: Node, params: Optional[Node]) -> "TemplateNode":
        return cls(name, params)

    def name(self) -> Node:
        return self._name

    def params(self) -> Optional[Node]:
        return self._params

    def printLeft(self, s):
        self._name.print(s)
        s.write("<")
        if self._params is not None:
            self._params.print(s)
        s.write(">")


class FunctionNode(Node):
    """
    A named function. The function type is printed around the name, so the right
    side of this node is already emitted inline by printLeft and hasRight stays False.
    """

    def __init__(self, name: Node, func_type: Node):
        super().__init__(Kind.FUNCTION, False)
        self._name = name
        self._func_type = func_type

    @classmethod
    def create(cls, name: Node, func_type: Node) -> "FunctionNode":
        return cls(name, func_type)

    def name(self) -> Node:
        return self._name

    def funcType(self) -> Node:
        return self._func_type

    def printLeft(self, s):
        self._func_type.printLeft(s)
        self._name.print(s)
        self._func_type.printRight(s)


class ConversionOperatorNode(Node):

    def __init__(self, conversion_type: Node):
        super().__init__(Kind.CONVERSION_OPERATOR)
        self._type = conversion_type

    @classmethod
    def create(cls, context, conversion_type: Node) -> "ConversionOperatorNode":
        # not interned
        return cls(conversion_type)

    def type(self) -> Node:
        return self._type

    def printLeft(self, s):
        s.write("operator ")
        self._type.print(s)
