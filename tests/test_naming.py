"""Tests for the naming module."""

from jaxrs_scaffold.naming import build_nickname, camelize, sanitize_name, to_api_name


class TestToApiName:
    """Test API class names built from tags."""

    def test_simple_tag(self):
        assert to_api_name("pet") == "PetApi"

    def test_kebab_tag(self):
        assert to_api_name("store-orders") == "StoreOrdersApi"

    def test_snake_tag(self):
        assert to_api_name("user_accounts") == "UserAccountsApi"

    def test_empty_tag(self):
        assert to_api_name("") == "DefaultApi"

    def test_camel_case_kept(self):
        assert to_api_name("petStore") == "PetStoreApi"

    def test_valid_identifier(self):
        assert to_api_name("my tag!").isidentifier()


class TestBuildNickname:
    """Test Java method names for operations."""

    def test_operation_id_wins(self):
        assert build_nickname("get", "/pet/{petId}", "getPetById") == "getPetById"

    def test_snake_operation_id(self):
        assert build_nickname("get", "/pets", "find_pets") == "findPets"

    def test_generated_with_path_param(self):
        assert build_nickname("get", "/pet/{petId}") == "getPetByPetId"

    def test_generated_static_path(self):
        assert build_nickname("post", "/store/order") == "postStoreOrder"

    def test_generated_root(self):
        assert build_nickname("GET", "/") == "get"

    def test_valid_identifier(self):
        assert build_nickname("delete", "/files/{file-name}/v1.2").isidentifier()


class TestHelpers:
    def test_camelize(self):
        assert camelize("pet_store") == "PetStore"
        assert camelize("pet_store", lower_first=True) == "petStore"
        assert camelize("") == ""

    def test_sanitize(self):
        assert sanitize_name("a-b.c[0]") == "a_b_c_0_"
