"""Tests for the context_builder module."""

from pathlib import Path

from jaxrs_scaffold.context_builder import build_tag_groups, resolve_type
from jaxrs_scaffold.loader import load_spec
from jaxrs_scaffold.models import PathItem, SpecOperation, Specification


class TestBuildTagGroups:
    """Test grouping of the petstore document."""

    @classmethod
    def setup_class(cls):
        cls.spec = load_spec(Path(__file__).parent / "fixtures" / "petstore.yaml")
        cls.groups = build_tag_groups(cls.spec)
        cls.by_tag = {g.tag: g for g in cls.groups}
        cls.ops = {op.nickname: op for g in cls.groups for op in g.operations}

    def test_groups_sorted(self):
        assert [g.tag for g in self.groups] == ["default", "pet", "store"]

    def test_class_names(self):
        assert [g.class_name for g in self.groups] == ["DefaultApi", "PetApi", "StoreApi"]

    def test_primary_tag_grouping(self):
        """getPetById is tagged pet and store but filed only under pet."""
        assert [op.nickname for op in self.by_tag["pet"].operations] == [
            "addPet", "findPetsByStatus", "getPetById", "postPetByPetIdUploadImage",
        ]
        assert [op.nickname for op in self.by_tag["store"].operations] == ["getInventory"]

    def test_untagged_goes_to_default(self):
        assert [op.path for op in self.by_tag["default"].operations] == ["/health"]

    def test_array_return(self):
        op = self.ops["findPetsByStatus"]
        assert op.return_type == "List<Pet>"
        assert op.return_base_type == "Pet"
        assert op.return_container == "array"

    def test_map_return(self):
        op = self.ops["getInventory"]
        assert op.return_type == "Map<String, Integer>"
        assert op.return_container == "map"

    def test_no_return(self):
        op = self.ops["addPet"]
        assert op.return_base_type is None
        assert op.return_type is None

    def test_default_response_code(self):
        op = self.ops["getPetById"]
        assert [r.code for r in op.responses] == ["200", "404", "0"]
        assert op.responses[1].base_type is None

    def test_parameters(self):
        op = self.ops["getPetById"]
        assert len(op.all_params) == 1
        param = op.all_params[0]
        assert (param.name, param.location, param.data_type, param.required) == ("petId", "path", "Long", True)

    def test_body_parameter(self):
        param = self.ops["addPet"].all_params[0]
        assert param.location == "body"
        assert param.data_type == "Pet"

    def test_array_query_parameter(self):
        assert self.ops["findPetsByStatus"].all_params[0].data_type == "List<String>"

    def test_consumes_inherited(self):
        assert self.ops["addPet"].consumes == ["application/json"]
        assert self.ops["postPetByPetIdUploadImage"].consumes == ["multipart/form-data"]

    def test_http_method_upper(self):
        assert self.ops["addPet"].http_method == "POST"


class TestBuildOperationExtensions:
    def test_vendor_extensions_copied(self):
        spec_op = SpecOperation(tags=["pet"], vendor_extensions={"x-tags": ["marker"]})
        spec = Specification(paths={"/pet": PathItem(operations={"get": spec_op})})
        operation = build_tag_groups(spec)[0].operations[0]
        assert operation.vendor_extensions == {"x-tags": ["marker"]}
        assert operation.vendor_extensions is not spec_op.vendor_extensions

    def test_no_paths(self):
        assert build_tag_groups(Specification(paths=None)) == []


class TestResolveType:
    """Test schema -> Java type names."""

    def test_ref(self):
        assert resolve_type({"$ref": "#/definitions/Pet"}) == ("Pet", "Pet", None)

    def test_primitives(self):
        assert resolve_type({"type": "string"})[0] == "String"
        assert resolve_type({"type": "integer", "format": "int64"})[0] == "Long"
        assert resolve_type({"type": "integer", "format": "int32"})[0] == "Integer"
        assert resolve_type({"type": "number", "format": "double"})[0] == "Double"
        assert resolve_type({"type": "boolean"})[0] == "Boolean"
        assert resolve_type({"type": "string", "format": "date-time"})[0] == "Date"
        assert resolve_type({"type": "file"})[0] == "File"

    def test_array_of_refs(self):
        assert resolve_type({"type": "array", "items": {"$ref": "#/definitions/Tag"}}) == (
            "List<Tag>", "Tag", "array",
        )

    def test_map(self):
        assert resolve_type({"type": "object", "additionalProperties": {"type": "string"}}) == (
            "Map<String, String>", "String", "map",
        )

    def test_plain_object(self):
        assert resolve_type({"type": "object"}) == ("Object", "Object", None)

    def test_empty(self):
        assert resolve_type(None) == (None, None, None)
        assert resolve_type({}) == (None, None, None)


class TestSameApiName:
    """Tags rendering to the same API class share one group."""

    def test_case_variants_merged(self, caplog):
        spec = Specification(paths={
            "/a": PathItem(operations={"get": SpecOperation(tags=["pet"])}),
            "/b": PathItem(operations={"get": SpecOperation(tags=["Pet"])}),
        })
        with caplog.at_level("WARNING", logger="jaxrs_scaffold.context_builder"):
            groups = build_tag_groups(spec)

        assert len(groups) == 1
        assert groups[0].tag == "pet"
        assert groups[0].class_name == "PetApi"
        assert [op.path for op in groups[0].operations] == ["/a", "/b"]
        assert "'Pet' merged into 'pet'" in caplog.text
