from enum import Enum
from typing import Optional

from .borland_ast import Kind, Node, NodeArray, Qualifiers


class UnknownTypeError(Exception):
    def __init__(self, given_str, message="Not able to map the given value to a known type"):
        self.message = message
        self.given_str = given_str
        super().__init__(self.message)

    def __str__(self):
        return f"[{self.given_str}] {self.message}"


class Conventions(Enum):
    FASTCALL = 0
    STDCALL = 1
    CDECL = 2
    PASCAL = 3
    UNKNOWN = 4


class CallConv(Node):
    _PREFIXES = {
        Conventions.FASTCALL: "__fastcall ",
        Conventions.STDCALL: "__stdcall ",
        Conventions.PASCAL: "__pascal ",
    }

    def __init__(self, conv: Conventions):
        super().__init__(Kind.CALL_CONV)
        self._conv = conv

    @classmethod
    def create(cls, context, conv) -> "CallConv":
        try:
            conv = Conventions(conv)
        except ValueError:
            raise UnknownTypeError(conv, message="Not a known calling convention")
        return cls(conv)

    def conv(self) -> Conventions:
        return self._conv

    def printLeft(self, s):
        # cdecl is the default and is not spelled out
        s.write(self._PREFIXES.get(self._conv, ""))


class OperatorType(Enum):
    NEW = " new"
    DELETE = " delete"
    NEW_ARRAY = " new[]"
    DELETE_ARRAY = " delete[]"
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    XOR = "^"
    BITAND = "&"
    BITOR = "|"
    NOT = "!"
    COMPL = "~"
    ASSIGN = "="
    LT = "<"
    GT = ">"
    ADD_ASSIGN = "+="
    SUB_ASSIGN = "-="
    MUL_ASSIGN = "*="
    DIV_ASSIGN = "/="
    MOD_ASSIGN = "%="
    XOR_ASSIGN = "^="
    AND_ASSIGN = "&="
    OR_ASSIGN = "|="
    SHL = "<<"
    SHR = ">>"
    SHL_ASSIGN = "<<="
    SHR_ASSIGN = ">>="
    EQ = "=="
    NE = "!="
    LE = "<="
    GE = ">="
    LAND = "&&"
    LOR = "||"
    INCR = "++"
    DECR = "--"
    COMMA = ","
    ARROW_STAR = "->*"
    ARROW = "->"
    CALL = "()"
    SUBSCRIPT = "[]"


class OperatorNode(Node):

    def __init__(self, op: OperatorType):
        super().__init__(Kind.OPERATOR)
        self._op = op

    @classmethod
    def create(cls, context, op) -> "OperatorNode":
        if not isinstance(op, OperatorType):
            raise UnknownTypeError(op, message="Not a known overloadable operator")
        return cls(op)

    def op(self) -> OperatorType:
        return self._op

    def printLeft(self, s):
        s.write("operator")
        s.write(self._op.value)


class TypeNode(Node):
    """Base for all type nodes, each of them carries its own cv-qualifiers"""

    def __init__(self, kind: Kind, quals: Optional[Qualifiers] = None, has_right: bool = False):
        super().__init__(kind, has_right)
        self._quals = quals if quals is not None else Qualifiers()

    def quals(self) -> Qualifiers:
        return self._quals


class BuiltInTypeNode(TypeNode):

    def __init__(self, type_name: str, quals: Qualifiers, kind: Kind = Kind.BUILT_IN_TYPE):
        super().__init__(kind, quals)
        self._type_name = type_name

    @classmethod
    def create(cls, context, type_name: str, quals: Qualifiers) -> "BuiltInTypeNode":
        cached = context.getBuiltInType(type_name, quals)
        if cached is not None:
            return cached
        new_type = cls(type_name, quals)
        context.addBuiltInType(new_type)
        return new_type

    def typeName(self) -> str:
        return self._type_name

    def printLeft(self, s):
        self._quals.printSpaceR(s)
        s.write(self.typeName())


class IntegralTypeNode(BuiltInTypeNode):

    def __init__(self, type_name: str, is_unsigned: bool, quals: Qualifiers):
        super().__init__(type_name, quals, kind=Kind.INTEGRAL_TYPE)
        self._is_unsigned = is_unsigned

    @classmethod
    def create(cls, context, type_name: str, is_unsigned: bool, quals: Qualifiers) -> "IntegralTypeNode":
        cached = context.getIntegralType(type_name, is_unsigned, quals)
        if cached is not None:
            return cached
        new_type = cls(type_name, is_unsigned, quals)
        context.addIntegralType(new_type)
        return new_type

    def isUnsigned(self) -> bool:
        return self._is_unsigned

    def printLeft(self, s):
        self._quals.printSpaceR(s)
        if self._is_unsigned:
            s.write("unsigned ")
        s.write(self._type_name)


class Signedness(Enum):
    SIGNED = 0
    UNSIGNED = 1
    UNKNOWN = 2


class CharTypeNode(BuiltInTypeNode):
    """char, signed char and unsigned char are three distinct types"""

    def __init__(self, signedness: Signedness, quals: Qualifiers):
        super().__init__("char", quals, kind=Kind.CHAR_TYPE)
        self._signedness = signedness

    @classmethod
    def create(cls, context, signedness: Signedness, quals: Qualifiers) -> "CharTypeNode":
        cached = context.getCharType(signedness, quals)
        if cached is not None:
            return cached
        new_type = cls(signedness, quals)
        context.addCharType(new_type)
        return new_type

    def signedness(self) -> Signedness:
        return self._signedness

    def typeName(self) -> str:
        if self._signedness == Signedness.SIGNED:
            return "signed char"
        if self._signedness == Signedness.UNSIGNED:
            return "unsigned char"
        return "char"


class FloatTypeNode(BuiltInTypeNode):
    _NAMES_BY_SIZE = {
        4: "float",
        8: "double",
        10: "long double",
    }

    def __init__(self, size: int, quals: Qualifiers):
        if size not in self._NAMES_BY_SIZE:
            raise UnknownTypeError(size, message="Not a supported floating point size")
        super().__init__(self._NAMES_BY_SIZE[size], quals, kind=Kind.FLOAT_TYPE)
        self._size = size

    @classmethod
    def create(cls, context, size: int, quals: Qualifiers) -> "FloatTypeNode":
        cached = context.getFloatType(size, quals)
        if cached is not None:
            return cached
        new_type = cls(size, quals)
        context.addFloatType(new_type)
        return new_type

    def size(self) -> int:
        return self._size


class NamedTypeNode(TypeNode):
    """User defined type (class, struct, union, enum) referenced by its name node"""

    def __init__(self, type_name: Node, quals: Qualifiers):
        super().__init__(Kind.NAMED_TYPE, quals)
        self._name = type_name

    @classmethod
    def create(cls, context, type_name: Node, quals: Qualifiers) -> "NamedTypeNode":
        cached = context.getNamedType(type_name, quals)
        if cached is not None:
            return cached
        new_type = cls(type_name, quals)
        context.addNamedType(new_type)
        return new_type

    def name(self) -> Node:
        return self._name

    def printLeft(self, s):
        self._quals.printSpaceR(s)
        self._name.print(s)


def _printWrappedLeft(s, pointee: Node, symbol: str):
    """
    Left side of a pointer or reference to a function or array, e.g. the "void (__fastcall *"
    of "void (__fastcall *)(int)". Returns False if the pointee does not wrap its declarator.
    """
    if pointee.kind() == Kind.FUNCTION_TYPE:
        pointee.printReturnType(s)
        s.write("(")
        if pointee.callConv() is not None:
            pointee.callConv().print(s)
        s.write(symbol)
    elif pointee.kind() == Kind.ARRAY_NODE:
        pointee.printLeft(s)
        s.write(" (")
        s.write(symbol)
    elif pointee.hasRight():
        # pointer to pointer to function, the parenthesis are already open
        pointee.printLeft(s)
        s.write(symbol)
    else:
        return False
    return True


def _printWrappedRight(s, pointee: Node):
    if pointee.kind() in (Kind.FUNCTION_TYPE, Kind.ARRAY_NODE):
        s.write(")")
    pointee.printRight(s)


class PointerTypeNode(TypeNode):

    def __init__(self, pointee: Node, quals: Qualifiers):
        super().__init__(Kind.POINTER_TYPE, quals, has_right=pointee.hasRight())
        self._pointee = pointee

    @classmethod
    def create(cls, context, pointee: Node, quals: Qualifiers) -> "PointerTypeNode":
        cached = context.getPointerType(pointee, quals)
        if cached is not None:
            return cached
        new_type = cls(pointee, quals)
        context.addPointerType(new_type)
        return new_type

    def pointee(self) -> Node:
        return self._pointee

    def printLeft(self, s):
        if _printWrappedLeft(s, self._pointee, "*"):
            self._quals.printSpaceL(s)
            return
        self._pointee.print(s)
        if self._pointee.kind() == Kind.POINTER_TYPE and not (self._pointee.quals().isConst() or self._pointee.quals().isVolatile()):
            s.write("*")
        else:
            s.write(" *")
        self._quals.printSpaceL(s)

    def printRight(self, s):
        _printWrappedRight(s, self._pointee)


class ReferenceTypeNode(TypeNode):
    _SYMBOL = "&"

    def __init__(self, pointee: Node, kind: Kind = Kind.REFERENCE_TYPE):
        super().__init__(kind, has_right=pointee.hasRight())
        self._pointee = pointee

    @classmethod
    def create(cls, context, pointee: Node) -> "ReferenceTypeNode":
        cached = context.getReferenceType(pointee)
        if cached is not None:
            return cached
        new_type = cls(pointee)
        context.addReferenceType(new_type)
        return new_type

    def pointee(self) -> Node:
        return self._pointee

    def printLeft(self, s):
        if _printWrappedLeft(s, self._pointee, self._SYMBOL):
            return
        self._pointee.print(s)
        s.write(" ")
        s.write(self._SYMBOL)

    def printRight(self, s):
        _printWrappedRight(s, self._pointee)


class RReferenceTypeNode(ReferenceTypeNode):
    _SYMBOL = "&&"

    def __init__(self, pointee: Node):
        super().__init__(pointee, kind=Kind.RREFERENCE_TYPE)

    @classmethod
    def create(cls, context, pointee: Node) -> "RReferenceTypeNode":
        cached = context.getRReferenceType(pointee)
        if cached is not None:
            return cached
        new_type = cls(pointee)
        context.addRReferenceType(new_type)
        return new_type


class ArrayNode(TypeNode):

    def __init__(self, pointee: Node, size: int, quals: Qualifiers):
        super().__init__(Kind.ARRAY_NODE, quals, has_right=True)
        self._pointee = pointee
        self._size = size

    @classmethod
    def create(cls, context, pointee: Node, size: int, quals: Qualifiers) -> "ArrayNode":
        cached = context.getArray(pointee, size, quals)
        if cached is not None:
            return cached
        new_type = cls(pointee, size, quals)
        context.addArray(new_type)
        return new_type

    def pointee(self) -> Node:
        return self._pointee

    def size(self) -> int:
        return self._size

    def printLeft(self, s):
        self._quals.printSpaceR(s)
        self._pointee.printLeft(s)

    def printRight(self, s):
        s.write(f"[{self._size}]")
        self._pointee.printRight(s)


class FunctionTypeNode(TypeNode):
    """
    Signature of a function: calling convention, parameters, optional return type
    (Borland only encodes it for template functions), trailing qualifiers of methods.
    Left side holds the return type and calling convention, right side the parameter list.
    """

    def __init__(self, call_conv: Optional[CallConv], params: NodeArray, ret_type: Optional[Node], quals: Qualifiers, is_var_arg: bool):
        super().__init__(Kind.FUNCTION_TYPE, quals, has_right=True)
        self._call_conv = call_conv
        self._params = params
        self._ret_type = ret_type
        self._is_var_arg = is_var_arg

    @classmethod
    def create(cls, call_conv, params, ret_type=None, quals=None, is_var_arg=False) -> "FunctionTypeNode":
        if params is None:
            params = NodeArray.create()
        return cls(call_conv, params, ret_type, quals, is_var_arg)

    def callConv(self) -> Optional[CallConv]:
        return self._call_conv

    def params(self) -> NodeArray:
        return self._params

    def retType(self) -> Optional[Node]:
        return self._ret_type

    def isVarArg(self) -> bool:
        return self._is_var_arg

    def printReturnType(self, s):
        if self._ret_type is not None:
            self._ret_type.print(s)
            s.write(" ")

    def printLeft(self, s):
        self.printReturnType(s)
        if self._call_conv is not None:
            self._call_conv.print(s)

    def printRight(self, s):
        s.write("(")
        self._params.print(s)
        if self._is_var_arg:
            if not self._params.empty():
                s.write(", ")
            s.write("...")
        s.write(")")
        self._quals.printSpaceL(s)
