#!/usr/bin/python

import logging
import unittest
from io import StringIO

from borland_demangler.borland_ast import (
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
from borland_demangler.context import Context
from .context import config

LOG = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO, format="%(asctime)-15s %(message)s")
logging.disable(logging.CRITICAL)


class StubTypeNode(Node):
    """Emits fixed text on both sides of an embedded name"""

    def __init__(self, left, right="", has_right=False):
        super().__init__(Kind.FUNCTION_TYPE, has_right)
        self.left = left
        self.right = right

    def printLeft(self, s):
        s.write(self.left)

    def printRight(self, s):
        s.write(self.right)


class AstTestSuite(unittest.TestCase):

    def setUp(self):
        self.context = Context(config)

    def testPrintSkipsRightSideWithoutFlag(self):
        node = StubTypeNode("left", "right", has_right=False)
        self.assertEqual(node.str(), "left")
        self.assertFalse(node.hasRight())
        node = StubTypeNode("left", "right", has_right=True)
        self.assertEqual(node.str(), "leftright")
        self.assertTrue(node.hasRight())

    def testPrintToStream(self):
        name = NameNode.create(self.context, "foo")
        stream = StringIO()
        name.print(stream)
        name.print(stream)
        self.assertEqual(stream.getvalue(), "foofoo")
        self.assertEqual(str(name), "foo")

    def testNameInterning(self):
        first = NameNode.create(self.context, "Foo")
        second = NameNode.create(self.context, "Foo")
        other = NameNode.create(self.context, "Bar")
        self.assertIs(first, second)
        self.assertIsNot(first, other)
        self.assertEqual(first.str(), second.str())
        self.assertEqual(first.kind(), Kind.NAME)

    def testNameInterningIsPerContext(self):
        first = NameNode.create(self.context, "Foo")
        second = NameNode.create(Context(config), "Foo")
        self.assertIsNot(first, second)
        self.assertEqual(first.str(), second.str())

    def testNestedNameInterning(self):
        outer = NameNode.create(self.context, "Foo")
        inner = NameNode.create(self.context, "Bar")
        first = NestedNameNode.create(self.context, outer, inner)
        second = NestedNameNode.create(self.context, outer, inner)
        self.assertIs(first, second)
        self.assertIs(first.super(), outer)
        self.assertIs(first.name(), inner)
        self.assertEqual(first.str(), "Foo::Bar")
        self.assertEqual(first.kind(), Kind.NESTED_NAME)
        swapped = NestedNameNode.create(self.context, inner, outer)
        self.assertIsNot(first, swapped)
        self.assertEqual(swapped.str(), "Bar::Foo")

    def testDeeplyNestedName(self):
        name = NameNode.create(self.context, "ns")
        for part in ["Outer", "Inner", "method"]:
            name = NestedNameNode.create(self.context, name, NameNode.create(self.context, part))
        self.assertEqual(name.str(), "ns::Outer::Inner::method")

    def testNodeArrayOrdering(self):
        array = NodeArray.create()
        self.assertTrue(array.empty())
        self.assertEqual(array.str(), "")
        texts = ["int", "Foo", "char", "Foo"]
        for text in texts:
            array.addNode(NameNode.create(self.context, text))
        self.assertFalse(array.empty())
        self.assertEqual(array.size(), 4)
        self.assertEqual(array.str(), ", ".join(texts))
        self.assertIs(array.get(1), array.get(3))
        self.assertEqual(array.kind(), Kind.NODE_ARRAY)

    def testNodeArrayOutOfRange(self):
        array = NodeArray.create()
        self.assertIsNone(array.get(0))
        array.addNode(NameNode.create(self.context, "int"))
        self.assertEqual(array.get(0).str(), "int")
        self.assertIsNone(array.get(1))
        self.assertIsNone(array.get(-1))

    def testQualifiers(self):
        both = Qualifiers(True, True)
        stream = StringIO()
        both.printSpaceL(stream)
        self.assertEqual(stream.getvalue(), " volatile const")
        stream = StringIO()
        both.printSpaceR(stream)
        self.assertEqual(stream.getvalue(), "volatile const ")
        for is_volatile, is_const, left, right in [(False, False, "", ""), (True, False, " volatile", "volatile "), (False, True, " const", "const ")]:
            quals = Qualifiers(is_volatile, is_const)
            self.assertEqual(quals.isVolatile(), is_volatile)
            self.assertEqual(quals.isConst(), is_const)
            stream_l = StringIO()
            stream_r = StringIO()
            quals.printSpaceL(stream_l)
            quals.printSpaceR(stream_r)
            self.assertEqual(stream_l.getvalue(), left)
            self.assertEqual(stream_r.getvalue(), right)
        self.assertEqual(Qualifiers(), Qualifiers(False, False))
        self.assertNotEqual(Qualifiers(is_const=True), Qualifiers(is_volatile=True))

    def testTemplate(self):
        params = NodeArray.create()
        params.addNode(NameNode.create(self.context, "int"))
        params.addNode(NameNode.create(self.context, "Alloc"))
        template = TemplateNode.create(NameNode.create(self.context, "vector"), params)
        self.assertEqual(template.str(), "vector<int, Alloc>")
        scoped = NestedNameNode.create(self.context, NameNode.create(self.context, "std"), template)
        self.assertEqual(scoped.str(), "std::vector<int, Alloc>")

    def testTemplateWithoutParams(self):
        name = NameNode.create(self.context, "Foo")
        self.assertEqual(TemplateNode.create(name, None).str(), name.str() + "<>")
        self.assertEqual(TemplateNode.create(name, NodeArray.create()).str(), "Foo<>")

    def testFunctionDeclaratorSplit(self):
        name = NestedNameNode.create(self.context, NameNode.create(self.context, "Foo"), NameNode.create(self.context, "Bar"))
        func_type = StubTypeNode("void ", "(int) const", has_right=True)
        function = FunctionNode.create(name, func_type)
        self.assertEqual(function.str(), "void Foo::Bar(int) const")
        self.assertFalse(function.hasRight())
        self.assertEqual(function.kind(), Kind.FUNCTION)
        self.assertIs(function.name(), name)
        self.assertIs(function.funcType(), func_type)

    def testFunctionSplicesRightSideEvenWithoutFlag(self):
        name = NameNode.create(self.context, "f")
        function = FunctionNode.create(name, StubTypeNode("int ", "(char)", has_right=False))
        self.assertEqual(function.str(), "int f(char)")

    def testConversionOperator(self):
        node = ConversionOperatorNode.create(self.context, StubTypeNode("int"))
        self.assertEqual(node.str(), "operator int")
        self.assertFalse(node.hasRight())
        self.assertEqual(node.kind(), Kind.CONVERSION_OPERATOR)

    def testRenderingIsStable(self):
        params = NodeArray.create()
        params.addNode(NameNode.create(self.context, "int"))
        name = TemplateNode.create(NameNode.create(self.context, "Foo"), params)
        function = FunctionNode.create(name, StubTypeNode("void ", "(int)", has_right=True))
        first = function.str()
        self.assertEqual(first, "void Foo<int>(int)")
        self.assertEqual(function.str(), first)
        self.assertEqual(params.size(), 1)


if __name__ == '__main__':
    unittest.main()
