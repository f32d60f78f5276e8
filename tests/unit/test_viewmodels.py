"""
Tests for the RepoViz ViewModels.

Signals are connected directly, so no Qt event loop is needed.
"""

import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from repoviz_core.adapters.static_source import StaticConnectionSource
from repoviz_core.domain.models import Connection, FileInfo
from repoviz_core.domain.enums import GraphStatus, LayoutMode
from repoviz_core.ports.scanner_port import ScannerPort, DirectoryPickerPort, ScanError
from repoviz_core.services.graph_engine import GraphEngine
from repoviz_core.services.repository import RepositoryLoader, RepositorySnapshot
from repoviz_app.viewmodels import GraphVM, RepositoryVM, AppCoordinator
from repoviz_app.workers.load_worker import LoadWorker


TREE = FileInfo(name="repo", path="", is_dir=True, children=[
    FileInfo(name="a.ts", path="a.ts", is_dir=False),
    FileInfo(name="b.ts", path="b.ts", is_dir=False),
    FileInfo(name="docs", path="docs", is_dir=True, children=[]),
])

CONNECTIONS = [
    {"from": "a.ts", "to": "b.ts", "fromFile": "a.ts", "toFile": "b.ts", "type": "import"},
    {"from": "b.ts", "to": "pkg", "fromFile": "b.ts", "toFile": "pkg", "type": "external"},
]


class FakeScanner(ScannerPort):
    def __init__(self, tree=TREE, error=None):
        self.tree = tree
        self.error = error

    def scan(self, root_path):
        if self.error:
            raise self.error
        return self.tree


class FakePicker(DirectoryPickerPort):
    def __init__(self, result):
        self.result = result

    def select_directory(self):
        return self.result


def make_repository_vm(scanner=None, picker=None):
    loader = RepositoryLoader(scanner or FakeScanner(), StaticConnectionSource(CONNECTIONS))
    return RepositoryVM(loader, picker)


def positions(graph):
    return {node_id: (n.position.x, n.position.y) for node_id, n in graph.nodes.items()}


class TestGraphVM:
    """Graph rebuilding and selection."""

    @pytest.fixture
    def vm(self):
        vm = GraphVM()
        vm.set_connections([Connection.from_dict(c) for c in CONNECTIONS])
        return vm

    def test_initial_state_empty(self):
        vm = GraphVM()
        assert vm.status == GraphStatus.EMPTY
        assert vm.empty_message == "No connections found"

    def test_set_connections_builds_graph(self, vm):
        assert vm.graph.node_ids() == {"a.ts", "b.ts", "pkg"}
        assert vm.empty_message == ""

    def test_graph_changed_emitted(self, vm):
        calls = []
        vm.graph_changed.connect(lambda: calls.append(True))
        vm.select_file(FileInfo(name="a.ts", path="a.ts", is_dir=False))
        assert calls == [True]

    def test_select_file_scopes_graph(self, vm):
        vm.select_file(FileInfo(name="a.ts", path="a.ts", is_dir=False))
        assert len(vm.graph.edges) == 1
        assert vm.graph.nodes["a.ts"].is_selected

    def test_same_selection_does_not_rebuild(self, vm):
        vm.select_file(FileInfo(name="a.ts", path="a.ts", is_dir=False))
        calls = []
        vm.graph_changed.connect(lambda: calls.append(True))
        vm.select_file(FileInfo(name="a.ts", path="a.ts", is_dir=False))
        assert calls == []

    def test_directory_selection_clears_focus(self, vm):
        vm.select_file(FileInfo(name="a.ts", path="a.ts", is_dir=False))
        vm.select_file(FileInfo(name="docs", path="docs", is_dir=True))
        assert vm.focal_file is None
        assert len(vm.graph.edges) == 2

    def test_empty_for_selection_message(self, vm):
        vm.select_file(FileInfo(name="c.ts", path="c.ts", is_dir=False))
        assert vm.status == GraphStatus.NO_CONNECTIONS_FOR_SELECTION
        assert vm.empty_message == "No connections for c.ts"

    def test_dragged_positions_survive_same_identity(self, vm):
        assert vm.move_node("a.ts", 12.0, 34.0)
        vm.refresh()
        pos = vm.graph.nodes["a.ts"].position
        assert (pos.x, pos.y) == (12.0, 34.0)

    def test_positions_recomputed_when_identity_changes(self, vm):
        vm.move_node("a.ts", 12.0, 34.0)
        vm.set_connections([Connection.from_dict(CONNECTIONS[0])])
        pos = vm.graph.nodes["a.ts"].position
        assert (pos.x, pos.y) != (12.0, 34.0)

    def test_selection_switches_to_force_layout(self, vm):
        b_ts = FileInfo(name="b.ts", path="b.ts", is_dir=False)
        vm.select_file(b_ts)
        # Both connections touch b.ts, so node/edge identity is unchanged
        expected = GraphEngine().build(vm.connections, focal=b_ts)
        assert vm.graph.layout == LayoutMode.FORCE
        assert positions(vm.graph) == positions(expected)

    def test_clearing_selection_returns_to_tree_layout(self, vm):
        vm.select_file(FileInfo(name="b.ts", path="b.ts", is_dir=False))
        vm.clear_selection()
        expected = GraphEngine().build(vm.connections)
        assert vm.graph.layout == LayoutMode.TREE
        assert positions(vm.graph) == positions(expected)

    def test_drag_dropped_when_layout_changes(self, vm):
        vm.move_node("a.ts", 12.0, 34.0)
        vm.select_file(FileInfo(name="b.ts", path="b.ts", is_dir=False))
        vm.clear_selection()
        pos = vm.graph.nodes["a.ts"].position
        assert (pos.x, pos.y) == (0.0, 50.0)

    def test_only_dragged_nodes_kept(self, vm):
        vm.graph.nodes["b.ts"].position.x = 999.0  # not reported via move_node
        vm.move_node("a.ts", 12.0, 34.0)
        vm.refresh()
        expected = positions(GraphEngine().build(vm.connections))
        expected["a.ts"] = (12.0, 34.0)
        assert positions(vm.graph) == expected

    def test_reset_rebuilds_once(self, vm):
        vm.select_file(FileInfo(name="a.ts", path="a.ts", is_dir=False))
        graphs = []
        vm.graph_changed.connect(lambda: graphs.append(vm.graph))
        vm.reset([Connection.from_dict(CONNECTIONS[1])])
        assert vm.focal_file is None
        assert len(graphs) == 1
        assert graphs[0].node_ids() == {"b.ts", "pkg"}

    def test_move_unknown_node(self, vm):
        assert vm.move_node("ghost.ts", 1.0, 2.0) is False

    def test_layout_mode_override(self, vm):
        vm.set_layout_mode(LayoutMode.FORCE)
        xs = {n.position.x for n in vm.graph.nodes.values()}
        assert not xs <= {0.0, 280.0}
        assert vm.settings.layout_mode == LayoutMode.FORCE

    def test_payload(self, vm):
        payload = vm.payload()
        assert len(payload["nodes"]) == 3
        assert len(payload["edges"]) == 2


class TestRepositoryVM:
    """Loading, errors and view switching."""

    def test_load_success(self):
        vm = make_repository_vm()
        vm.open_repository("/repo")
        assert vm.load() is True
        assert vm.error is None
        assert vm.loading is False
        assert vm.file_count == 4
        assert vm.connection_count == 2
        assert vm.file_tree == [TREE]

    def test_load_failure_sets_error(self):
        vm = make_repository_vm(scanner=FakeScanner(error=ScanError("Repository path does not exist: /x")))
        vm.open_repository("/x")
        errors = []
        vm.error_changed.connect(errors.append)
        assert vm.load() is False
        assert vm.error == "Repository path does not exist: /x"
        assert errors == ["Repository path does not exist: /x"]
        assert vm.loading is False

    def test_error_without_message_uses_default(self):
        vm = make_repository_vm(scanner=FakeScanner(error=OSError()))
        vm.open_repository("/x")
        vm.load()
        assert vm.error == "Failed to load repository"

    def test_load_without_repository(self):
        assert make_repository_vm().load() is False

    def test_select_directory(self):
        vm = make_repository_vm(picker=FakePicker("/picked"))
        assert vm.select_directory() is True
        assert vm.repo_path == "/picked"

    def test_select_directory_cancelled(self):
        vm = make_repository_vm(picker=FakePicker(""))
        assert vm.select_directory() is False
        assert vm.repo_path is None

    def test_back_resets(self):
        vm = make_repository_vm()
        vm.open_repository("/repo")
        vm.load()
        vm.back()
        assert vm.repo_path is None
        assert vm.file_tree == []
        assert vm.connection_count == 0

    def test_view_mode(self):
        vm = make_repository_vm()
        modes = []
        vm.view_mode_changed.connect(modes.append)
        vm.set_view_mode("tree")
        vm.set_view_mode("tree")
        assert vm.view_mode == "tree"
        assert modes == ["tree"]
        with pytest.raises(ValueError):
            vm.set_view_mode("table")


class TestAppCoordinator:
    """Cross-ViewModel wiring."""

    def test_loaded_connections_reach_graph(self):
        repository_vm = make_repository_vm()
        graph_vm = GraphVM()
        coordinator = AppCoordinator(repository_vm, graph_vm)
        repository_vm.open_repository("/repo")
        repository_vm.load()
        assert graph_vm.graph.node_ids() == {"a.ts", "b.ts", "pkg"}

        coordinator.select_file(FileInfo(name="b.ts", path="b.ts", is_dir=False))
        assert len(graph_vm.graph.edges) == 2
        assert graph_vm.graph.nodes["b.ts"].is_selected

    def test_back_clears_graph(self):
        repository_vm = make_repository_vm()
        graph_vm = GraphVM()
        coordinator = AppCoordinator(repository_vm, graph_vm)
        repository_vm.open_repository("/repo")
        repository_vm.load()
        repository_vm.back()
        assert graph_vm.graph.is_empty
        assert coordinator.parent() is None

    def test_load_in_background(self, monkeypatch):
        # Run the worker body on the calling thread
        monkeypatch.setattr(LoadWorker, "start", LoadWorker.run)
        repository_vm = make_repository_vm()
        graph_vm = GraphVM()
        coordinator = AppCoordinator(repository_vm, graph_vm)
        messages = []
        coordinator.status_message.connect(lambda text, timeout: messages.append(text))

        assert coordinator.load_in_background() is False
        repository_vm.open_repository("/repo")
        assert coordinator.load_in_background() is True
        assert repository_vm.loading is False
        assert repository_vm.connection_count == 2
        assert graph_vm.graph.node_ids() == {"a.ts", "b.ts", "pkg"}
        assert messages[-1] == "Loaded 4 files, 2 connections"

    def test_load_in_background_failure(self, monkeypatch):
        monkeypatch.setattr(LoadWorker, "start", LoadWorker.run)
        repository_vm = make_repository_vm(scanner=FakeScanner(error=ScanError("boom")))
        coordinator = AppCoordinator(repository_vm, GraphVM())
        repository_vm.open_repository("/repo")
        assert coordinator.load_in_background() is True
        assert repository_vm.error == "boom"
        assert repository_vm.loading is False

    def test_reload_clears_selection(self):
        repository_vm = make_repository_vm()
        graph_vm = GraphVM()
        coordinator = AppCoordinator(repository_vm, graph_vm)
        repository_vm.open_repository("/repo")
        repository_vm.load()
        coordinator.select_file(FileInfo(name="a.ts", path="a.ts", is_dir=False))

        rebuilt = []
        graph_vm.graph_changed.connect(lambda: rebuilt.append(graph_vm.focal_file))
        repository_vm.load()
        assert rebuilt == [None]


class TestLoadWorker:
    """Worker signals, driven by calling run() directly."""

    def test_success_signals(self):
        worker = LoadWorker(make_repository_vm().loader, "/repo")
        snapshots, results = [], []
        worker.loaded.connect(snapshots.append)
        worker.finished.connect(lambda ok, message: results.append((ok, message)))
        worker.run()
        assert isinstance(snapshots[0], RepositorySnapshot)
        assert snapshots[0].connection_count == 2
        assert results == [(True, "Loaded 4 files, 2 connections")]

    def test_failure_signals(self):
        loader = make_repository_vm(scanner=FakeScanner(error=ScanError("Repository path does not exist: /x"))).loader
        worker = LoadWorker(loader, "/x")
        snapshots, results = [], []
        worker.loaded.connect(snapshots.append)
        worker.finished.connect(lambda ok, message: results.append((ok, message)))
        worker.run()
        assert snapshots == []
        assert results == [(False, "Repository path does not exist: /x")]
