from .borland_ast import (
    ConversionOperatorNode,
    FunctionNode,
    Kind,
    NameNode,
    NestedNameNode,
    Node,
    NodeArray,
    Qualifiers,
    TemplateNode,
)
from .borland_ast_types import (
    ArrayNode,
    BuiltInTypeNode,
    CallConv,
    CharTypeNode,
    Conventions,
    FloatTypeNode,
    FunctionTypeNode,
    IntegralTypeNode,
    NamedTypeNode,
    OperatorNode,
    OperatorType,
    PointerTypeNode,
    ReferenceTypeNode,
    RReferenceTypeNode,
    Signedness,
    TypeNode,
    UnknownTypeError,
)
from .context import Context
from .DemanglerConfig import DemanglerConfig
