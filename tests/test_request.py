import json
import unittest

from dataclasses import dataclass

from python_graphql_envelope import ConstructionError, DecodeError, Request, serialize


@dataclass
class BookInput:
    title: str


CREATE_BOOK = "mutation createBook($book: createBook!) { createBook(book: $book) { title }}"
CREATE_BOOK_ANONYMOUS = "mutation ($book: createBook!) { createBook(book: $book) { title }}"


class Test(unittest.TestCase):
    def test_empty_variables(self):
        request = Request.from_query("{ apiVersion }")
        self.assertEqual(request.to_dict(), {"query": "{ apiVersion }"})
        self.assertEqual(serialize(request), '{"query":"{ apiVersion }"}')

    def test_from_query_never_emits_optional_keys(self):
        for query in ["", "{ a }", 'query { b(x: "y") }', "\n{\n  c\n}\n"]:
            body = json.loads(Request.from_query(query).serialize())
            self.assertEqual(body, {"query": query})

    def test_variable_add_on_anonymous(self):
        request = Request.from_query_with_variable("", "test", BookInput(title="Rocket Engineering"))
        self.assertTrue(request.is_sealed)
        with self.assertRaises(ConstructionError):
            request.set_variable("test", BookInput(title="Rocket Engineering"))
        for name, value in [("other", 1), ("test", None), ("x", {"a": [1]})]:
            with self.assertRaises(ConstructionError):
                request.set_variable(name, value)
        self.assertEqual(request.variables, {"test": {"title": "Rocket Engineering"}})

    def test_request(self):
        request = Request.from_operation("createBook", CREATE_BOOK)
        request.set_variable("book", BookInput(title="Rocket Engineering"))

        expected = {
            "operationName": "createBook",
            "variables": {"book": {"title": "Rocket Engineering"}},
            "query": CREATE_BOOK,
        }
        body = json.loads(request.serialize())
        self.assertEqual(body["operationName"], expected["operationName"])
        self.assertEqual(body, expected)
        self.assertEqual(list(body), ["operationName", "variables", "query"])

    def test_request_anonymous(self):
        request = Request.from_query_with_variable(
            CREATE_BOOK_ANONYMOUS, "book", BookInput(title="Rocket Engineering")
        )
        self.assertEqual(
            json.loads(request.serialize()),
            {"variables": {"book": {"title": "Rocket Engineering"}}, "query": CREATE_BOOK_ANONYMOUS},
        )

    def test_operation_without_variables(self):
        request = Request.from_operation("GetSensor", "query GetSensor { sensor { id } }")
        self.assertFalse(request.is_anonymous)
        self.assertEqual(
            request.to_dict(),
            {"operationName": "GetSensor", "query": "query GetSensor { sensor { id } }"},
        )

    def test_operation_accepts_many_variables(self):
        request = Request.from_operation("op", "query op($a: Int, $b: Int) { f }")
        request.set_variable("a", 1)
        request.set_variable("b", [1, 2])
        request.set_variable("a", {"nested": True})
        self.assertEqual(request.variables, {"a": {"nested": True}, "b": [1, 2]})

    def test_from_query_accepts_first_variable_only(self):
        request = Request.from_query("query ($id: ID!) { node(id: $id) { id } }")
        request.set_variable("id", "1")
        self.assertTrue(request.is_sealed)
        with self.assertRaises(ConstructionError):
            request.set_variable("id", "2")
        self.assertEqual(request.variables, {"id": "1"})

    def test_rejects_non_json_variable(self):
        request = Request.from_operation("op", "query op { f }")
        with self.assertRaises(ConstructionError):
            request.set_variable("bad", object())
        self.assertEqual(request.variables, {})

    def test_serialize_options(self):
        request = Request.from_operation("op", "query op { f }")
        request.set_variable("b", 1)
        request.set_variable("a", 2)
        self.assertEqual(
            serialize(request, {"compact": False, "sort_keys": True}),
            '{"operationName": "op", "query": "query op { f }", "variables": {"a": 2, "b": 1}}',
        )

    def test_deserialize(self):
        request = Request.deserialize(
            '{"operationName": "createBook", "variables": {"book": {"title": "t"}}, "query": "q"}'
        )
        self.assertEqual(request.operation_name, "createBook")
        self.assertEqual(request.variables, {"book": {"title": "t"}})
        self.assertEqual(request.query, "q")

        request = Request.deserialize('{"query": "{ apiVersion }"}')
        self.assertEqual(request, Request.from_query("{ apiVersion }"))

    def test_deserialize_errors(self):
        for body in ["", "[]", '{"variables": {}}', '{"query": 1}', '{"query": "q", "variables": []}']:
            with self.assertRaises(DecodeError):
                Request.deserialize(body)

    def test_rejects_non_finite_numbers(self):
        request = Request.from_operation("op", "query op($v: Float) { f(v: $v) }")
        for value in [float("nan"), float("inf"), float("-inf"), {"a": [float("nan")]}]:
            with self.subTest(value=value):
                with self.assertRaises(ConstructionError):
                    request.set_variable("v", value)
        with self.assertRaises(ConstructionError):
            Request.from_query_with_variable("query ($v: Float) { f(v: $v) }", "v", float("inf"))
        self.assertEqual(request.variables, {})

    def test_serialize_is_strict_json(self):
        request = Request.from_operation("op", "query op($v: Float) { f(v: $v) }")
        request.set_variable("v", 1.5)
        body = request.serialize()
        self.assertEqual(json.loads(body, parse_constant=self.fail), request.to_dict())

        request.variables["v"] = float("nan")
        with self.assertRaises(ValueError):
            request.serialize()
