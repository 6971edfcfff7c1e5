# -*- coding: utf-8 -*-
"""Test cases for the registry."""
import unittest

from sudoku_pro.engine.carver import CARVERS, Carver
from sudoku_pro.utils.registry import Registry


class DummyCarver(Carver):
    def carve(self, holes):
        grid = self.solver.generate_complete_grid()
        return [row[:] for row in grid], grid


class OtherCarver(DummyCarver):
    pass


class TestRegistry(unittest.TestCase):
    """Test registry functionality."""

    def test_carver_registry_mapping(self):
        for name in CARVERS.list_names():
            with self.subTest(name=name):
                carver_cls = CARVERS.get(name)
                self.assertIsNotNone(carver_cls, f"{name} should be retrievable from registry")
                self.assertTrue(issubclass(carver_cls, Carver))
        with self.assertRaises(ValueError):
            CARVERS.get("non_existent_carver")
        self.assertIsNone(CARVERS.get(None))

    def test_register_module(self):
        registry = Registry("test_carvers")
        registry.register_module("dummy", DummyCarver)
        self.assertIs(registry.get("dummy"), DummyCarver)
        self.assertEqual(DummyCarver._name, "dummy")
        with self.assertRaises(KeyError):
            registry.register_module("dummy", DummyCarver)
        registry.register_module("dummy", OtherCarver, force=True)
        self.assertIs(registry.get("dummy"), OtherCarver)

    def test_register_module_as_decorator(self):
        registry = Registry("test_carvers")

        @registry.register_module("decorated")
        class DecoratedCarver(DummyCarver):
            pass

        self.assertIs(registry.get("decorated"), DecoratedCarver)
        self.assertIn("decorated", registry.modules)
        with self.assertRaises(TypeError):
            registry.register_module(42, DummyCarver)

    def test_dynamic_import(self):
        registry = Registry("test_carvers")
        carver_cls = registry.get("tests.utils.registry_test.DummyCarver")
        self.assertIs(carver_cls, DummyCarver)
        self.assertIn("tests.utils.registry_test.DummyCarver", registry.list_names())
        with self.assertRaises(ImportError):
            registry.get("tests.utils.registry_test.MissingCarver")

    def test_default_mapping_import_failure(self):
        registry = Registry("test_carvers", default_mapping={"broken": "no_such_package.Carver"})
        self.assertEqual(registry.list_names(), ["broken"])
        with self.assertRaises(ImportError):
            registry.get("broken")
