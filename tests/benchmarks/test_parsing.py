# -*- coding: utf-8 -*-

from py_gql_lang.lang import parse, parse_value

NESTED_QUERY = "{ a " * 100 + "}" * 100


def test_parse_kitchen_sink(benchmark, fixture_file):
    doc = fixture_file("kitchen-sink.graphql")
    benchmark(parse, doc)


def test_parse_kitchen_sink_no_location(benchmark, fixture_file):
    doc = fixture_file("kitchen-sink.graphql")
    benchmark(parse, doc, no_location=True)


def test_parse_schema_kitchen_sink(benchmark, fixture_file):
    doc = fixture_file("schema-kitchen-sink.graphql")
    benchmark(parse, doc)


def test_parse_nested_query(benchmark):
    benchmark(parse, NESTED_QUERY)


def test_parse_large_list_value(benchmark):
    benchmark(parse_value, "[%s]" % ", ".join(str(i) for i in range(1000)))
