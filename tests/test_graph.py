from itinerary_sorter.domain.models import Place, Ticket, TicketType
from itinerary_sorter.graph.components import (
    connected_components,
    describe_disconnected_segments,
    find_segments,
)
from itinerary_sorter.graph.route_graph import build_route_graph


def test_build_route_graph_registers_every_place(make_ticket):
    tickets = [make_ticket("B", "C"), make_ticket("A", "B")]

    graph = build_route_graph(tickets)

    assert list(graph.nodes) == ["B", "C", "A"]
    assert graph.out_degree == {"A": 1, "B": 1, "C": 0}
    assert graph.in_degree == {"A": 0, "B": 1, "C": 1}
    assert graph.edge_count == 2


def test_build_route_graph_keeps_edges_in_input_order(make_ticket):
    first = make_ticket("A", "B")
    second = make_ticket("A", "C")

    graph = build_route_graph([first, second])

    assert list(graph.outgoing("A")) == [first, second]
    assert graph.degrees("A") == (2, 0)
    assert list(graph.outgoing("C")) == []


def test_build_route_graph_skips_tickets_without_endpoints(make_ticket):
    tickets = [make_ticket("A", "B"), make_ticket(None, "C"), make_ticket("B", None)]

    graph = build_route_graph(tickets)

    assert set(graph.nodes) == {"A", "B"}
    assert graph.edge_count == 1


def test_build_route_graph_is_fresh_per_call(make_ticket):
    tickets = [make_ticket("A", "B")]

    first = build_route_graph(tickets)
    second = build_route_graph(tickets)

    assert first is not second
    assert first.edges["A"] is not second.edges["A"]


def test_place_identity_is_by_id_not_name():
    tickets = [
        Ticket(
            id="t1",
            type=TicketType.BUS,
            from_place=Place(id="1", name="Central"),
            to_place=Place(id="2", name="Central"),
        )
    ]

    graph = build_route_graph(tickets)

    assert len(graph) == 2


def test_connected_components_ignore_edge_direction(make_ticket):
    # C -> B joins C into the A/B component even though B has no edge to C
    tickets = [make_ticket("A", "B"), make_ticket("D", "E"), make_ticket("C", "B")]

    components = connected_components(build_route_graph(tickets))

    assert components == [["A", "B", "C"], ["D", "E"]]


def test_find_segments_resolves_local_endpoints(make_ticket):
    tickets = [make_ticket("C", "D"), make_ticket("A", "B"), make_ticket("B", "X")]

    segments = find_segments(build_route_graph(tickets))

    assert [(s.start_name, s.end_name) for s in segments] == [("C", "D"), ("A", "X")]
    assert [(s.ticket_count, s.place_count) for s in segments] == [(1, 2), (2, 3)]


def test_segment_without_start_is_unknown(make_ticket):
    tickets = [make_ticket("A", "B"), make_ticket("B", "A")]

    (segment,) = find_segments(build_route_graph(tickets))

    assert segment.start_place is None
    assert segment.start_name == "unknown"
    assert segment.end_name == "unknown"


def test_describe_disconnected_segments_lists_missing_links(make_ticket):
    tickets = [make_ticket("A", "B"), make_ticket("C", "D")]

    message = describe_disconnected_segments(find_segments(build_route_graph(tickets)))

    assert message == (
        "Route has 2 disconnected segments. "
        "Segment 1: A → B (1 tickets, 2 places); "
        "Segment 2: C → D (1 tickets, 2 places). "
        "Potential connections needed: Missing: B → C; Missing: D → A"
    )
