import io

import pytest

from algodemos.citynav import (
    CityGraph,
    RoadNotFoundError,
    build_sample_city,
    format_network,
    main,
)


def _chain(n):
    city = CityGraph(n)
    for a in range(n - 1):
        city.add_road(a, a + 1)
    return city


def test_add_road_returns_sequential_ids():
    city = CityGraph(3)
    assert city.add_road(0, 1) == 0
    assert city.add_road(1, 2) == 1
    assert city.num_roads == 2


def test_neighbors_newest_first_and_symmetric():
    city = CityGraph(3)
    city.add_road(0, 1)
    city.add_road(0, 2)
    assert city.neighbors(0) == [(2, 1), (1, 0)]
    assert city.neighbors(1) == [(0, 0)]
    assert city.neighbors(2) == [(0, 1)]


def test_block_and_unblock_road():
    city = CityGraph(2)
    road = city.add_road(0, 1)
    assert city.is_blocked(road) is False
    assert city.block_road(1, 0) == road
    assert city.is_blocked(road) is True
    assert city.unblock_road(0, 1) == road
    assert city.is_blocked(road) is False


def test_block_missing_road_raises():
    city = CityGraph(3)
    city.add_road(0, 1)
    with pytest.raises(RoadNotFoundError):
        city.block_road(0, 2)
    with pytest.raises(RoadNotFoundError):
        city.unblock_road(1, 2)


def test_road_not_found_message():
    city = CityGraph(3)
    with pytest.raises(RoadNotFoundError, match="Road between intersections 0 and 2 not found"):
        city.block_road(0, 2)


def test_out_of_range_intersections_raise():
    city = CityGraph(2)
    with pytest.raises(IndexError):
        city.add_road(0, 2)
    with pytest.raises(IndexError):
        city.is_reachable(-1, 0)
    with pytest.raises(IndexError):
        city.neighbors(5)
    with pytest.raises(IndexError):
        city.is_blocked(0)


def test_too_many_intersections_rejected():
    with pytest.raises(ValueError):
        CityGraph(101)


def test_reachability_on_chain():
    city = _chain(4)
    assert city.is_reachable(0, 3) is True
    assert city.is_reachable(3, 0) is True
    assert city.is_reachable(2, 2) is True


def test_blocking_cuts_reachability():
    city = _chain(4)
    city.block_road(1, 2)
    assert city.is_reachable(0, 3) is False
    assert city.is_reachable(0, 1) is True
    city.unblock_road(2, 1)
    assert city.is_reachable(0, 3) is True


def test_shortest_path_chain():
    city = _chain(4)
    assert city.shortest_path(0, 3) == [0, 1, 2, 3]
    assert city.shortest_path(3, 1) == [3, 2, 1]
    assert city.shortest_path(2, 2) == [2]


def test_shortest_path_prefers_direct_road():
    city = _chain(4)
    city.add_road(0, 3)
    assert city.shortest_path(0, 3) == [0, 3]


def test_shortest_path_none_when_unreachable():
    city = CityGraph(3)
    city.add_road(0, 1)
    assert city.shortest_path(0, 2) is None


def test_connected_components_partition_all_intersections():
    city = CityGraph(5)
    city.add_road(0, 1)
    city.add_road(3, 4)
    components = city.connected_components()
    assert components == [[0, 1], [2], [3, 4]]


def test_sample_city_paths_use_open_roads():
    city = build_sample_city()
    for start, end in [(0, 4), (1, 3), (4, 0)]:
        path = city.shortest_path(start, end)
        assert path[0] == start and path[-1] == end
        for a, b in zip(path, path[1:]):
            assert b in {dest for dest, _ in city.neighbors(a)}


def test_sample_city_reachability_and_components():
    city = build_sample_city()
    assert city.num_roads == 8
    assert city.is_reachable(0, 4) is True
    assert city.is_reachable(1, 5) is False
    components = city.connected_components()
    assert len(components) == 2
    assert sorted(sum(components, [])) == list(range(6))
    assert [5] in components


def test_sample_city_shortest_distance():
    city = build_sample_city()
    assert len(city.shortest_path(0, 4)) - 1 == 2
    assert city.shortest_path(1, 3) == [1, 3]


def test_sample_city_blocking_keeps_component_count():
    city = build_sample_city()
    city.block_road(1, 2)
    city.block_road(2, 3)
    assert city.is_reachable(0, 4) is True
    assert len(city.connected_components()) == 2
    assert city.is_reachable(1, 3) is True


def test_format_network_marks_status():
    city = CityGraph(3)
    road = city.add_road(0, 1)
    text = format_network(city)
    assert "Intersection 0 connects to: 1 (OPEN) " in text
    assert "Intersection 2 connects to: (no roads)" in text
    assert "=== CITY ROAD NETWORK ===" in text
    city.block_road(0, 1)
    assert city.is_blocked(road)
    assert "Intersection 1 connects to: 0 (BLOCKED) " in format_network(city)


def _run_main(monkeypatch, capsys, stdin):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    code = main([])
    return code, capsys.readouterr().out


def test_main_exit(monkeypatch, capsys):
    code, out = _run_main(monkeypatch, capsys, "8\n")
    assert code == 0
    assert "Exiting Smart City Navigation System..." in out
    assert "Road 7 added between intersections 5 and 5" in out


def test_main_shortest_path(monkeypatch, capsys):
    code, out = _run_main(monkeypatch, capsys, "2\n0\n4\n8\n")
    assert code == 0
    assert "Shortest path: 0 -> 2 -> 4" in out
    assert "Shortest distance: 2 roads" in out


def test_main_invalid_choice_and_intersections(monkeypatch, capsys):
    code, out = _run_main(monkeypatch, capsys, "9\n1\n0\n7\n8\n")
    assert code == 0
    assert "Invalid choice! Please try again." in out
    assert "Invalid intersection numbers!" in out


def test_main_block_missing_road(monkeypatch, capsys):
    code, out = _run_main(monkeypatch, capsys, "4\n0 5\n8\n")
    assert code == 0
    assert "Road between intersections 0 and 5 not found" in out


def test_main_runs_comprehensive_tests(monkeypatch, capsys):
    code, out = _run_main(monkeypatch, capsys, "7\n8\n")
    assert code == 0
    assert "Can travel from 1 to 5? NO" in out
    assert "Connected components after unblocking: 2" in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    code, out = _run_main(monkeypatch, capsys, "3\n")
    assert code == 0
    assert "Total connected components: 2" in out