"""Route queries against the sample datasets in tests/data."""

import pytest

from roadtrip.domain.errors import CountryNotFoundError
from roadtrip.domain.models import (
    BorderRecord,
    CapitalDistanceRecord,
    Distance,
    IdentityRecord,
)
from roadtrip.identity.aliases import generate_aliases
from roadtrip.identity.table import IdentityTable
from roadtrip.services import RoadTripService


def test_albania_greece_scenario():
    identities = IdentityTable.from_records(
        [
            IdentityRecord("ALB", "Albania", "2020-12-31"),
            IdentityRecord("GRC", "Greece", "2020-12-31"),
            IdentityRecord("MNG", "Montenegro", "2020-12-31"),
            IdentityRecord("MAC", "Macedonia (Former Yugoslav Republic of)", "2020-12-31"),
            IdentityRecord("SER", "Serbia", "2020-12-31"),
        ]
    )
    service = RoadTripService(identities)
    service.resolve_and_build_graph(
        [
            BorderRecord(
                "Albania",
                (
                    ("Greece", None),
                    ("Montenegro", None),
                    ("North Macedonia", None),
                    ("Serbia", None),
                ),
            )
        ],
        [CapitalDistanceRecord("ALB", "GRC", 360)],
    )

    assert service.direct_distance("Albania", "Greece") == 360
    assert list(service.shortest_path("Albania", "Greece").hops) == [
        "Albania --> Greece (360 km.)"
    ]


class TestShortestPath:
    """Shortest routes over the sample graph."""

    def test_direct_border(self, service):
        route = service.shortest_path("Albania", "Greece")

        assert route.hops == ("Albania --> Greece (360 km.)",)
        assert route.path == ("ALB", "GRC")
        assert route.total_distance == Distance.known(360)

    def test_multi_hop_uses_display_names(self, service):
        route = service.shortest_path("Albania", "Bulgaria")

        assert route.hops == (
            "Albania --> Macedonia (131 km.)",
            "Macedonia --> Bulgaria (171 km.)",
        )
        assert route.total_distance == Distance.known(302)

    def test_cheaper_detour_beats_direct_border(self, service):
        route = service.shortest_path("Montenegro", "Croatia")

        assert route.names == ("Montenegro", "Bosnia-Herzegovina", "Croatia")
        assert route.total_distance == Distance.known(463)

    def test_unmeasured_border_is_not_used(self, service):
        # Greece -> Turkey has a border but no capital distance in that direction
        assert service.direct_distance("Greece", "Turkey") is None
        assert service.edge_weight("Greece", "Turkey") == Distance.UNKNOWN

        route = service.shortest_path("Greece", "Turkey")
        assert route.hops == (
            "Greece --> Bulgaria (526 km.)",
            "Bulgaria --> Turkey (830 km.)",
        )

    def test_edges_keep_ingestion_direction(self, service):
        assert service.direct_distance("Turkey", "Greece") == 812
        assert service.shortest_path("Turkey", "Greece").hops == (
            "Turkey --> Greece (812 km.)",
        )

    def test_route_ends_at_requested_countries(self, service):
        route = service.shortest_path("Kosovo", "Rumania")

        assert route.hops[0].startswith("Kosovo --> ")
        assert route.hops[-1].split(" --> ")[1].startswith("Rumania ")

    def test_alternate_spellings(self, service):
        assert service.shortest_path("Romania", "Serbia").hops == (
            "Rumania --> Serbia (447 km.)",
        )
        assert service.shortest_path("South Korea", "North Korea").hops == (
            "Korea, Republic of --> Korea, People's Republic of (195 km.)",
        )
        assert service.shortest_path("Cote d'Ivoire", "Liberia").hops == (
            "Cote D’Ivoire --> Liberia (600 km.)",
        )

    def test_two_letter_codes_are_padded(self, service):
        assert service.direct_distance("United Kingdom", "Ireland") == 464

    def test_isolated_country_has_no_route(self, service):
        route = service.shortest_path("Iceland", "Albania")

        assert route.is_empty
        assert route.hops == ()

    def test_disconnected_components(self, service):
        assert service.shortest_path("Ireland", "Albania").is_empty

    def test_same_country_is_no_route(self, service):
        assert service.shortest_path("Albania", "Albania").is_empty

    def test_unknown_names_give_empty_route(self, service):
        assert service.shortest_path("Qwertyzx", "Albania").is_empty
        assert service.shortest_path("Albania", "Qwertyzx").is_empty
        assert service.direct_distance("Qwertyzx", "Albania") is None

    def test_unresolved_border_name_is_valid_but_unroutable(self, service):
        assert service.is_valid_country("Hungary")
        assert service.shortest_path("Hungary", "Serbia").is_empty


class TestGraph:
    """Shape of the graph built from the sample datasets."""

    def test_every_vertex_is_an_identity(self, service):
        assert all(state_id in service.identities for state_id in service.graph)

    def test_island_is_a_vertex(self, service):
        assert service.graph["ICE"] == {}

    def test_unresolved_records_are_dropped(self, service):
        assert "Hungary" not in str(service.graph)
        assert service.lookup("Atlantis") is None
        assert service.lookup("Lemuria") is None

    def test_override_registers_provisional_alias(self, service):
        assert service.identities.aliases("RUM") == ("Rumania", "Romania")

    def test_known_distances(self, service):
        assert service.direct_distance("Albania", "Greece") == 360
        assert service.direct_distance("Montenegro", "Bosnia and Herzegovina") == 174
        assert service.direct_distance("Korea, South", "Korea, North") == 195

    def test_no_border_no_distance(self, service):
        # capdist.csv has Albania/Iceland, but they share no border
        assert service.direct_distance("Albania", "Iceland") is None


def test_loading_twice_is_idempotent(repository):
    first = RoadTripService.from_repository(repository)
    second = RoadTripService.from_repository(repository)

    assert first.graph == second.graph
    assert first.identities.snapshot() == second.identities.snapshot()


def test_registered_aliases_resolve_back(service, repository):
    for record in repository.load_border_records():
        state_id = service.lookup(record.name)
        if state_id is None:
            continue
        for alias in generate_aliases(record.name):
            assert service.lookup(alias) == state_id


class TestValidation:
    """User input validation."""

    @pytest.mark.parametrize(
        "name", ["Albania", "North Macedonia", "the Bulgaria", "Romania", "Korea, South"]
    )
    def test_valid_names(self, service, name):
        assert service.is_valid_country(name)

    @pytest.mark.parametrize("name", ["", "Qwertyzx", "albania", "Lemuria"])
    def test_invalid_names(self, service, name):
        assert not service.is_valid_country(name)

    def test_resolve_country(self, service):
        assert service.resolve_country("Macedonia") == "MAC"

        with pytest.raises(CountryNotFoundError) as exc_info:
            service.resolve_country("Qwertyzx")
        assert exc_info.value.country_name == "Qwertyzx"


def test_format_result(service):
    assert service.format_result(service.shortest_path("Albania", "Greece")) == (
        "Route from Albania to Greece:\n* Albania --> Greece (360 km.)"
    )
    assert service.format_result(service.shortest_path("Iceland", "Albania")) == (
        "No path found between Iceland and Albania"
    )


class TestSuggestions:
    """Did-you-mean suggestions for rejected names."""

    def test_close_misspelling(self, service):
        assert service.suggest_country("Albanai") == "Albania"
        assert service.suggest_country("  bulgaria ") == "Bulgaria"

    def test_suggests_learned_aliases(self, service):
        assert service.suggest_country("Romaina") == "Romania"

    def test_nothing_close_enough(self, service):
        assert service.suggest_country("Qwertyzx") is None
        assert service.suggest_country("") is None

    def test_cutoff_is_configurable(self, repository):
        strict = RoadTripService.from_repository(repository, suggestion_cutoff=100)

        assert strict.suggest_country("Albanai") is None
        assert strict.suggest_country("albania") == "Albania"
