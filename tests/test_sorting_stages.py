"""Unit tests for the individual sorting stages."""

import pytest

from itinerary_sorter.domain.errors import SortingInvariantError
from itinerary_sorter.domain.models import Place, Ticket, TicketType
from itinerary_sorter.graph.route_graph import RouteGraph, build_route_graph
from itinerary_sorter.sorting import (
    EndpointResolver,
    InputValidator,
    PathTraverser,
    SequenceValidator,
    StructuralValidator,
)


class TestInputValidator:
    def test_accepts_valid_tickets(self, make_ticket):
        outcome = InputValidator().validate([make_ticket("A", "B"), make_ticket("B", "C")])

        assert outcome.ok
        assert outcome.errors == ()

    @pytest.mark.parametrize("tickets", [None, []])
    def test_rejects_missing_or_empty_list(self, tickets):
        outcome = InputValidator().validate(tickets)

        assert not outcome.ok
        assert outcome.errors == ("No tickets provided for sorting",)

    def test_single_ticket_is_accepted(self, make_ticket):
        assert InputValidator().validate([make_ticket("A", "B")]).ok

    def test_single_ticket_still_gets_per_ticket_checks(self, make_ticket):
        outcome = InputValidator().validate([make_ticket("A", "A")])

        assert outcome.errors == ("Ticket 1 has same 'from' and 'to' place: A",)

    def test_collects_every_offending_ticket(self, make_ticket):
        tickets = [
            make_ticket(None, "B"),
            make_ticket("B", "C"),
            make_ticket("C", None),
            make_ticket("D", "D"),
        ]

        outcome = InputValidator().validate(tickets)

        assert outcome.errors == (
            "Ticket 1 has invalid 'from' place",
            "Ticket 3 has invalid 'to' place",
            "Ticket 4 has same 'from' and 'to' place: D",
        )

    def test_place_without_id_is_invalid(self):
        ticket = Ticket(
            id="t1",
            type=TicketType.TRAIN,
            from_place=Place(id=None, name="Nowhere"),
            to_place=Place(id="", name="Elsewhere"),
        )

        outcome = InputValidator().validate([ticket])

        assert outcome.errors == (
            "Ticket 1 has invalid 'from' place",
            "Ticket 1 has invalid 'to' place",
        )

    def test_max_tickets(self, make_ticket):
        tickets = [make_ticket("A", "B"), make_ticket("B", "C"), make_ticket("C", "D")]

        outcome = InputValidator(max_tickets=2).validate(tickets)

        assert outcome.errors == ("Too many tickets provided for sorting (3 > 2)",)


class TestStructuralValidator:
    def test_linear_graph_is_valid(self, make_ticket):
        graph = build_route_graph([make_ticket("A", "B"), make_ticket("B", "C")])

        outcome = StructuralValidator().validate(graph)

        assert outcome.ok
        assert outcome.warnings == ()

    def test_isolated_place(self, make_ticket):
        graph = build_route_graph([make_ticket("A", "B")])
        graph.nodes["Z"] = Place(id="Z", name="Zurich")
        graph.in_degree["Z"] = 0
        graph.out_degree["Z"] = 0

        outcome = StructuralValidator().validate(graph)

        assert not outcome.ok
        assert outcome.errors == ("Place 'Zurich' is isolated (no connections)",)

    def test_branch_reports_multiple_endings(self, make_ticket):
        graph = build_route_graph([make_ticket("A", "B"), make_ticket("A", "D")])

        outcome = StructuralValidator().validate(graph)

        assert outcome.errors == (
            "Multiple possible ending places found (2). Route may have branches.",
        )
        assert outcome.warnings == (
            "Place 'A' has 2 outgoing connections - multiple route options",
        )

    def test_merge_reports_multiple_starts(self, make_ticket):
        graph = build_route_graph([make_ticket("A", "C"), make_ticket("B", "C")])

        outcome = StructuralValidator().validate(graph)

        assert outcome.errors == (
            "Multiple possible starting places found (2). Route may have branches.",
        )
        assert outcome.warnings == (
            "Place 'C' has 2 incoming connections - potential merge point",
        )

    def test_disconnected_chains_get_segment_diagnosis(self, make_ticket):
        graph = build_route_graph([make_ticket("A", "B"), make_ticket("C", "D")])

        outcome = StructuralValidator().validate(graph)

        assert outcome.errors[:2] == (
            "Multiple possible starting places found (2). Route may have branches.",
            "Multiple possible ending places found (2). Route may have branches.",
        )
        assert outcome.errors[2].startswith("Route has 2 disconnected segments.")
        assert "Segment 1: A → B (1 tickets, 2 places)" in outcome.errors[2]
        assert "Segment 2: C → D (1 tickets, 2 places)" in outcome.errors[2]
        assert "Missing: B → C; Missing: D → A" in outcome.errors[2]

    def test_segment_diagnosis_can_be_disabled(self, make_ticket):
        graph = build_route_graph([make_ticket("A", "B"), make_ticket("C", "D")])

        outcome = StructuralValidator(segment_diagnosis=False).validate(graph)

        assert len(outcome.errors) == 2
        assert not any("disconnected" in error for error in outcome.errors)

    def test_closed_loop_names_the_cycle(self, make_ticket):
        graph = build_route_graph(
            [make_ticket("A", "B"), make_ticket("B", "C"), make_ticket("C", "A")]
        )

        outcome = StructuralValidator().validate(graph)

        assert outcome.errors == (
            "No starting place found (all places have incoming connections)",
            "No ending place found (all places have outgoing connections)",
            "Circular route detected at 'A'",
        )


class TestEndpointResolver:
    def test_finds_start_and_end(self, make_ticket):
        graph = build_route_graph([make_ticket("B", "C"), make_ticket("A", "B")])

        outcome = EndpointResolver().resolve(graph)

        assert outcome.ok
        assert outcome.start_place == Place(id="A", name="A")
        assert outcome.end_place == Place(id="C", name="C")

    def test_fails_closed_on_ambiguity(self, make_ticket):
        graph = build_route_graph([make_ticket("A", "B"), make_ticket("C", "D")])

        outcome = EndpointResolver().resolve(graph)

        assert not outcome.ok
        assert outcome.start_place is None
        assert outcome.errors == (
            "Multiple starting places detected",
            "Multiple ending places detected",
        )

    def test_no_start_or_end(self, make_ticket):
        graph = build_route_graph([make_ticket("A", "B"), make_ticket("B", "A")])

        outcome = EndpointResolver().resolve(graph)

        assert outcome.errors == (
            "Could not determine starting place",
            "Could not determine ending place",
        )


class TestPathTraverser:
    def test_walks_chain_in_order(self, make_ticket):
        bc, ab, cd = make_ticket("B", "C"), make_ticket("A", "B"), make_ticket("C", "D")
        graph = build_route_graph([bc, ab, cd])

        outcome = PathTraverser().traverse(graph, graph.nodes["A"])

        assert outcome.ok
        assert outcome.sorted_tickets == (ab, bc, cd)

    def test_stops_at_branch(self, make_ticket):
        graph = build_route_graph(
            [make_ticket("A", "B"), make_ticket("B", "C"), make_ticket("B", "D")]
        )

        outcome = PathTraverser().traverse(graph, graph.nodes["A"])

        assert not outcome.ok
        assert outcome.errors == (
            "Multiple route options from 'B' - cannot determine single path",
            "Could not create complete path - used 1 of 3 tickets",
        )
        assert outcome.sorted_tickets == ()

    def test_detects_cycle(self, make_ticket):
        graph = build_route_graph(
            [make_ticket("A", "B"), make_ticket("B", "C"), make_ticket("C", "A")]
        )

        outcome = PathTraverser().traverse(graph, graph.nodes["A"])

        assert outcome.errors == ("Circular route detected at 'A'",)

    def test_reports_unreached_tickets(self, make_ticket):
        # the B <-> C loop is never reached from A
        graph = build_route_graph(
            [make_ticket("A", "D"), make_ticket("B", "C"), make_ticket("C", "B")]
        )

        outcome = PathTraverser().traverse(graph, graph.nodes["A"])

        assert outcome.errors == (
            "Could not create complete path - used 1 of 3 tickets",
        )

    def test_start_without_id_is_an_invariant_violation(self):
        with pytest.raises(SortingInvariantError):
            PathTraverser().traverse(RouteGraph(), Place(id=None, name="A"))


class TestSequenceValidator:
    def test_connected_sequence(self, make_ticket):
        outcome = SequenceValidator().validate(
            [make_ticket("A", "B"), make_ticket("B", "C", TicketType.BUS)]
        )

        assert outcome.ok
        assert outcome.warnings == ()

    def test_empty_sequence(self):
        outcome = SequenceValidator().validate([])

        assert outcome.errors == ("No tickets in sorted sequence",)

    def test_gap(self, make_ticket):
        outcome = SequenceValidator().validate(
            [make_ticket("A", "B"), make_ticket("C", "D", TicketType.BUS)]
        )

        assert outcome.errors == (
            "Gap in route between ticket 1 and 2: 'B' does not connect to 'C'",
        )

    def test_tight_connection_warning(self, make_ticket):
        outcome = SequenceValidator().validate(
            [make_ticket("A", "B"), make_ticket("B", "C")]
        )

        assert outcome.ok
        assert outcome.warnings == (
            "Potential tight connection at 'B' between two train tickets",
        )

    def test_tight_connection_warning_can_be_disabled(self, make_ticket):
        outcome = SequenceValidator(tight_connection_warnings=False).validate(
            [make_ticket("A", "B"), make_ticket("B", "C")]
        )

        assert outcome.warnings == ()
