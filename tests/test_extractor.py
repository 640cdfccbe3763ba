"""Tests for the extractor module."""

import json

from gqlbridge.extractor import extract_tools
from gqlbridge.loader import load_schema, parse_schema
from gqlbridge.naming import OperationKind, split_tool_name


class TestExtractTools:
    """Test the full extraction pipeline with the bundled schema."""

    @classmethod
    def setup_class(cls):
        """Load schema and extract tools once for all tests."""
        cls.schema = load_schema()
        cls.tools = extract_tools(cls.schema)
        cls.tools_by_name = {t.name: t for t in cls.tools}

    def test_tool_count(self):
        """One tool per root query field plus one per root mutation field."""
        expected = len(self.schema.query_type.fields) + len(self.schema.mutation_type.fields)
        assert len(self.tools) == expected == 12

    def test_order_queries_then_mutations(self):
        names = [t.name for t in self.tools]
        assert names == [
            "query-tool_profiles",
            "query-tool_profile",
            "query-tool_posts",
            "query-tool_postAnalytics",
            "query-tool_organization",
            "query-tool_apiVersion",
            "mutation-tool_createPost",
            "mutation-tool_createPosts",
            "mutation-tool_updatePost",
            "mutation-tool_deletePost",
            "mutation-tool_updateSchedule",
            "mutation-tool_pauseQueue",
        ]

    def test_all_tool_names_unique(self):
        """Every tool name must be unique."""
        names = [t.name for t in self.tools]
        assert len(names) == len(set(names))

    def test_names_resolve_to_root_fields(self):
        """Splitting each name yields a known kind and exactly one root field."""
        for tool in self.tools:
            kind, field_name = split_tool_name(tool.name)
            root = self.schema.query_type if kind is OperationKind.QUERY else self.schema.mutation_type
            assert field_name in root.fields, f"{tool.name} has no matching field"

    def test_description_from_schema(self):
        tool = self.tools_by_name["mutation-tool_createPost"]
        assert tool.description == "Create a post and add it to the profile's queue."

    def test_description_fallback(self):
        assert self.tools_by_name["query-tool_organization"].description == "query-tool: organization"
        assert self.tools_by_name["mutation-tool_updatePost"].description == "mutation-tool: updatePost"

    def test_input_schema_is_object(self):
        for tool in self.tools:
            assert tool.input_schema["type"] == "object", f"{tool.name} schema is not an object"

    def test_no_arguments(self):
        tool = self.tools_by_name["query-tool_apiVersion"]
        assert tool.input_schema == {"type": "object", "properties": {}}

    def test_required_arguments(self):
        tool = self.tools_by_name["mutation-tool_updateSchedule"]
        assert tool.input_schema["required"] == ["profileId", "slots"]
        assert "required" not in self.tools_by_name["query-tool_posts"].input_schema

    def test_argument_description_and_default(self):
        props = self.tools_by_name["query-tool_posts"].input_schema["properties"]
        assert props["limit"]["description"] == "Maximum number of posts to return."
        assert props["limit"]["default"] == 20

    def test_enum_argument_default(self):
        props = self.tools_by_name["query-tool_posts"].input_schema["properties"]
        assert props["sortBy"]["default"] == "CREATED_AT_DESC"

    def test_enum_argument(self):
        props = self.tools_by_name["query-tool_profiles"].input_schema["properties"]
        assert props["channel"]["enum"] == [
            "INSTAGRAM", "FACEBOOK", "LINKEDIN", "TWITTER", "MASTODON",
        ]
        assert props["channel"]["description"] == "Only return profiles for this channel."

    def test_nested_input(self):
        props = self.tools_by_name["mutation-tool_createPost"].input_schema["properties"]
        post_input = props["input"]
        assert post_input["type"] == "object"
        assert post_input["required"] == ["profileId", "text"]
        assert post_input["properties"]["draft"]["default"] is False
        assert post_input["properties"]["media"]["items"]["required"] == ["url", "type"]

    def test_to_dict_wire_shape(self):
        data = self.tools_by_name["query-tool_profile"].to_dict()
        assert set(data) == {"name", "description", "inputSchema"}
        assert data["inputSchema"]["required"] == ["id"]

    def test_idempotent(self):
        """Extracting twice from the same schema gives byte-identical catalogs."""
        first = json.dumps([t.to_dict() for t in extract_tools(self.schema)])
        second = json.dumps([t.to_dict() for t in extract_tools(self.schema)])
        assert first == second


class TestMissingRootTypes:
    """Schemas without a mutation root type contribute only query tools."""

    def test_query_only(self):
        schema = parse_schema("type Query { ping: String, echo(text: String!): String }")
        assert [t.name for t in extract_tools(schema)] == ["query-tool_ping", "query-tool_echo"]

    def test_same_field_on_both_roots(self):
        schema = parse_schema(
            "type Query { post: String } type Mutation { post(text: String!): String }"
        )
        assert [t.name for t in extract_tools(schema)] == ["query-tool_post", "mutation-tool_post"]
