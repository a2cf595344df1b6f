import pytest

from errors import NotFoundError, StoreError, ValidationError
from models.category import Urgency
from services.categories import CategoryService
from stores.memory import InMemoryCategoryStore
from tests.helpers import FailingStore

SEED_NAMES = [
    "Development",
    "Design",
    "Documentation",
    "Testing",
    "Security",
    "Performance",
    "Marketing",
    "Research",
    "Planning",
]


@pytest.fixture
def failing_directory():
    return CategoryService(FailingStore())


class TestListAll:
    """Tests for CategoryService.list_all."""

    def test_fresh_directory_returns_seed(self, services):
        """Test that a fresh directory lists the nine seed categories in order."""
        categories = services.categories.list_all()

        assert [c.id for c in categories] == list(range(1, 10))
        assert [c.name for c in categories] == SEED_NAMES

    def test_seed_fields(self, services):
        """Test that seed entries carry their urgency, subcategories and color."""
        security = services.categories.list_all()[4]

        assert security.urgency == Urgency.URGENT
        assert security.subcategories == [
            "Audit",
            "Penetration Testing",
            "Compliance",
            "Access Control",
        ]
        assert security.description == "Security and compliance tasks"
        assert security.color == "#EF4444"

    def test_seed_colors_are_distinct(self, services):
        """Test that every seed category has its own color."""
        colors = [c.color for c in services.categories.list_all()]

        assert len(set(colors)) == len(colors)

    def test_store_failure_falls_back_to_seed(self, failing_directory):
        """Test that a failing store degrades to the seed list, not an error."""
        categories = failing_directory.list_all()

        assert [c.name for c in categories] == SEED_NAMES

    def test_returned_categories_are_copies(self, services):
        """Test that mutating a returned category does not change the directory."""
        services.categories.list_all()[0].subcategories.append("Hacked")

        assert "Hacked" not in services.categories.list_subcategories("Development")


class TestGetById:
    """Tests for CategoryService.get_by_id."""

    def test_get_existing(self, services):
        """Test looking up a seed category by ID."""
        category = services.categories.get_by_id(3)

        assert category.name == "Documentation"

    def test_get_missing_raises(self, services):
        """Test that an unknown ID raises NotFoundError."""
        with pytest.raises(NotFoundError, match="Category with ID 999 not found"):
            services.categories.get_by_id(999)


class TestSearch:
    """Tests for CategoryService.search."""

    def test_search_matches_name_and_subcategories(self, services):
        """Test that search matches names and subcategories case-insensitively."""
        names = [c.name for c in services.categories.search("test")]

        # Development has "Testing", Security has "Penetration Testing"
        assert names == ["Development", "Testing", "Security"]

    def test_search_returns_each_category_once(self, services):
        """Test that a category matching on several fields appears once."""
        results = services.categories.search("TESTING")

        ids = [c.id for c in results]
        assert len(ids) == len(set(ids))
        assert 4 in ids

    def test_search_subcategory_only(self, services):
        """Test matching on a subcategory alone."""
        names = [c.name for c in services.categories.search("roadmap")]

        assert names == ["Planning"]

    def test_search_no_match(self, services):
        """Test that no match returns an empty list."""
        assert services.categories.search("zzz") == []

    def test_search_store_failure_returns_empty(self, failing_directory):
        """Test that a failing store makes search return an empty list."""
        assert failing_directory.search("test") == []


class TestCategoryNames:
    """Tests for CategoryService.list_category_names."""

    def test_names_sorted(self, services):
        """Test that names are sorted alphabetically."""
        assert services.categories.list_category_names() == sorted(SEED_NAMES)

    def test_names_include_created(self, services):
        """Test that created categories show up in the name list."""
        services.categories.create({"name": "Ops"})

        assert "Ops" in services.categories.list_category_names()

    def test_names_fallback_keeps_declaration_order(self, failing_directory):
        """Test that the fallback name list is not sorted."""
        assert failing_directory.list_category_names() == SEED_NAMES


class TestSubcategories:
    """Tests for CategoryService.list_subcategories."""

    def test_subcategories_for_design(self, services):
        """Test listing the subcategories of Design."""
        assert services.categories.list_subcategories("Design") == [
            "UI/UX",
            "Graphics",
            "Branding",
            "Wireframes",
            "Prototyping",
        ]

    def test_subcategories_unknown_category(self, services):
        """Test that an unknown category has no subcategories."""
        assert services.categories.list_subcategories("Nonexistent") == []

    def test_subcategories_exact_name_only(self, services):
        """Test that the lookup is exact and case-sensitive."""
        assert services.categories.list_subcategories("design") == []

    def test_subcategories_store_failure(self, failing_directory):
        """Test that a failing store returns an empty list."""
        assert failing_directory.list_subcategories("Design") == []


class TestCreate:
    """Tests for CategoryService.create."""

    def test_create_with_defaults(self, services):
        """Test that missing fields get their defaults."""
        category = services.categories.create({"name": "Ops"})

        assert category.name == "Ops"
        assert category.urgency == Urgency.MEDIUM
        assert category.subcategories == []
        assert category.description == ""
        assert category.color == "#6366F1"
        assert category.id not in range(1, 10)

    def test_create_appends_to_list(self, services):
        """Test that a created category is listed after the seed."""
        created = services.categories.create({"name": "Ops"})

        categories = services.categories.list_all()
        assert len(categories) == 10
        assert categories[-1] == created

    def test_create_all_fields(self, services):
        """Test creating a category with every field supplied."""
        category = services.categories.create(
            {
                "name": "  Support  ",
                "subcategories": ["Tickets", "Escalations"],
                "urgency": "HIGH",
                "description": "Customer support",
                "color": "#10B981",
            }
        )

        assert category.name == "Support"
        assert category.subcategories == ["Tickets", "Escalations"]
        assert category.urgency == Urgency.HIGH
        assert category.description == "Customer support"
        assert category.color == "#10B981"

    def test_create_ids_unique(self, services):
        """Test that consecutive creates get distinct IDs."""
        ids = {services.categories.create({"name": f"Cat {i}"}).id for i in range(5)}

        assert len(ids) == 5
        assert ids.isdisjoint(range(1, 10))

    def test_create_does_not_reuse_deleted_id(self, services):
        """Test that the ID of a deleted category is not handed out again."""
        first = services.categories.create({"name": "First"})
        services.categories.delete(first.id)

        second = services.categories.create({"name": "Second"})

        assert second.id != first.id

    def test_create_ignores_supplied_id(self, services):
        """Test that callers cannot choose the ID."""
        category = services.categories.create({"name": "Ops", "id": 1})

        assert category.id != 1
        assert services.categories.get_by_id(1).name == "Development"

    def test_create_uses_configured_default_color(self, store):
        """Test that the default color comes from the service setting."""
        directory = CategoryService(store, default_color="#84CC16")

        assert directory.create({"name": "Ops"}).color == "#84CC16"

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_create_blank_name_raises(self, services, name):
        """Test that a blank or missing name raises ValidationError."""
        with pytest.raises(ValidationError, match="name is required"):
            services.categories.create({"name": name})

        assert len(services.categories.list_all()) == 9

    def test_create_missing_name_raises(self, services):
        """Test that a draft without a name raises ValidationError."""
        with pytest.raises(ValidationError):
            services.categories.create({"description": "No name"})

    def test_create_invalid_urgency_raises(self, services):
        """Test that an unknown urgency level is rejected."""
        with pytest.raises(ValidationError, match="Invalid urgency"):
            services.categories.create({"name": "Ops", "urgency": "critical"})

    def test_create_blank_subcategory_raises(self, services):
        """Test that empty subcategory names are rejected."""
        with pytest.raises(ValidationError):
            services.categories.create({"name": "Ops", "subcategories": ["A", " "]})

    def test_create_subcategory_with_comma_raises(self, services):
        """Test that subcategory names containing commas are rejected."""
        with pytest.raises(ValidationError, match="commas"):
            services.categories.create({"name": "Ops", "subcategories": ["A,B"]})

    def test_create_unknown_field_raises(self, services):
        """Test that unexpected draft keys are rejected."""
        with pytest.raises(ValidationError, match="priority"):
            services.categories.create({"name": "Ops", "priority": "high"})


class TestUpdate:
    """Tests for CategoryService.update."""

    def test_update_merges_fields(self, services):
        """Test that fields absent from the patch are unchanged."""
        updated = services.categories.update(2, {"urgency": "urgent"})

        assert updated.id == 2
        assert updated.name == "Design"
        assert updated.urgency == Urgency.URGENT
        assert updated.color == "#EC4899"

    def test_update_persists(self, services):
        """Test that later reads see the updated category."""
        services.categories.update(3, {"name": "Docs", "subcategories": ["API Docs"]})

        found = services.categories.get_by_id(3)
        assert found.name == "Docs"
        assert found.subcategories == ["API Docs"]
        assert services.categories.list_all()[2].name == "Docs"

    def test_update_keeps_id(self, services):
        """Test that an id in the patch does not change the category's ID."""
        updated = services.categories.update(5, {"id": 42, "description": "Sec"})

        assert updated.id == 5
        with pytest.raises(NotFoundError):
            services.categories.get_by_id(42)

    def test_update_missing_raises(self, services):
        """Test that updating an unknown ID raises NotFoundError."""
        with pytest.raises(NotFoundError, match="Category with ID 9999 not found"):
            services.categories.update(9999, {"name": "Nope"})

    def test_update_blank_name_raises(self, services):
        """Test that a blank name in the patch is rejected."""
        with pytest.raises(ValidationError):
            services.categories.update(1, {"name": "  "})

        assert services.categories.get_by_id(1).name == "Development"

    def test_update_invalid_urgency_raises(self, services):
        """Test that an unknown urgency level is rejected on update."""
        with pytest.raises(ValidationError):
            services.categories.update(1, {"urgency": "someday"})

        assert services.categories.get_by_id(1).urgency == Urgency.MEDIUM

    def test_update_subcategory_with_comma_raises(self, services):
        """Test that update rejects subcategory names containing commas."""
        with pytest.raises(ValidationError, match="commas"):
            services.categories.update(2, {"subcategories": ["UI, UX"]})

        assert services.categories.get_by_id(2).subcategories[0] == "UI/UX"

    def test_update_empty_color_raises(self, services):
        """Test that the color cannot be cleared."""
        with pytest.raises(ValidationError):
            services.categories.update(1, {"color": ""})

    def test_update_created_category(self, services):
        """Test updating a category created in the same session."""
        created = services.categories.create({"name": "Ops"})

        services.categories.update(created.id, {"color": "#F97316"})

        assert services.categories.get_by_id(created.id).color == "#F97316"

    def test_update_store_failure_propagates(self):
        """Test that a store write failure reaches the caller."""

        class BrokenWrites(InMemoryCategoryStore):
            def replace(self, category):
                raise StoreError("write failed")

        directory = CategoryService(BrokenWrites())

        with pytest.raises(StoreError):
            directory.update(1, {"name": "Dev"})


class TestDelete:
    """Tests for CategoryService.delete."""

    def test_delete_existing(self, services):
        """Test deleting a seed category."""
        assert services.categories.delete(9) is True

        with pytest.raises(NotFoundError):
            services.categories.get_by_id(9)
        assert len(services.categories.list_all()) == 8

    def test_delete_missing_is_noop(self, services):
        """Test that deleting an unknown ID returns True and changes nothing."""
        before = services.categories.list_all()

        assert services.categories.delete(9999) is True

        assert services.categories.list_all() == before

    def test_delete_twice(self, services):
        """Test that deleting the same ID twice succeeds both times."""
        assert services.categories.delete(4) is True
        assert services.categories.delete(4) is True

    def test_delete_does_not_affect_other_categories(self, services):
        """Test that deleting one category leaves the others in order."""
        services.categories.delete(2)

        names = [c.name for c in services.categories.list_all()]
        assert names == [n for n in SEED_NAMES if n != "Design"]
