"""Tests for loading PLAN.integrator workspaces."""

import sys
import textwrap

import pytest

from integrator.__main__ import main
from integrator.details.targets.component_target import FrameworkPaths
from integrator.details.tools.filelists import (
    framework_output_paths,
    resource_output_paths,
    write_target_file_lists,
)
from integrator.details.workspace import Workspace
from integrator.errors import InvalidTargetDefinitionError, PlanError

PLAN = textwrap.dedent(
    """
    CTX.configure(
        platform="ios",
        architecture=["arm64"],
        sandbox_root="Pods",
        client_root=".",
        build_configurations={"Debug": "debug", "Release": "release"},
    )
    CTX.manifest(path="Podfile")
    CTX.component_target(
        name="Alamofire",
        build_type="dynamic_framework",
        resources=["Alamofire/Info.plist"],
    )
    CTX.component_target(
        name="Charts",
        build_type="static_framework",
        resources=["Charts/Model.xcdatamodeld", "Charts/icon.png"],
        test_specs=["Charts/Tests"],
    )
    CTX.component_target(
        name="Vendored",
        build_type="dynamic_framework",
        should_build=False,
        frameworks=["Vendored/Vendored.framework"],
        xcframeworks=["Vendored/Crypto.xcframework"],
        on_demand_resources={"Vendored": {"level1": ["Vendored/level1.png"]}},
    )
    CTX.component_target(name="Debugger", resources=["Debugger/panel.xib"])
    CTX.user_project(
        path="App.xcodeproj",
        targets={"App": "application", "Widget": "app_extension"},
    )
    CTX.aggregate_target(
        label="Pods-App",
        components={"Debug": ["Alamofire", "Debugger"], "Release": ["Alamofire"]},
        user_targets=["App"],
    )
    CTX.aggregate_target(
        label="Pods-Widget",
        components={"Debug": ["Charts", "Vendored"], "Release": ["Charts"]},
        user_targets=["Widget"],
        embedded_in="Pods-App",
        application_extension_api_only=True,
    )
    """
)


class TestWorkspace:
    def test_loads_aggregate_targets(self, write_plan) -> None:
        workspace = Workspace(write_plan(PLAN))
        assert list(workspace.aggregate_targets) == ["Pods-App", "Pods-Widget"]
        widget = workspace.find_aggregate_target("Pods-Widget")
        assert widget.application_extension_api_only
        assert widget.requires_host_target()
        assert not widget.is_library()
        assert widget.sandbox.root == workspace.root / "Pods"
        assert widget.archs == ["arm64"]

    def test_embedded_components_are_merged_into_host(self, write_plan) -> None:
        workspace = Workspace(write_plan(PLAN))
        app = workspace.find_aggregate_target("Pods-App")
        assert [t.name for t in app.component_targets_for_build_configuration("Debug")] == [
            "Alamofire",
            "Debugger",
            "Charts",
            "Vendored",
        ]
        assert [t.name for t in app.component_targets_for_build_configuration("Release")] == [
            "Alamofire",
            "Charts",
        ]
        assert app.framework_paths("Debug") == (FrameworkPaths("Vendored/Vendored.framework"),)
        assert app.framework_paths("Release") == ()
        assert app.on_demand_resources == ("Vendored/level1.png",)

    def test_embedded_target_keeps_its_own_components(self, write_plan) -> None:
        workspace = Workspace(write_plan(PLAN))
        widget = workspace.find_aggregate_target("Pods-Widget")
        assert [t.name for t in widget.component_targets] == ["Charts", "Vendored"]

    def test_resources(self, write_plan) -> None:
        workspace = Workspace(write_plan(PLAN))
        app = workspace.find_aggregate_target("Pods-App")
        assert app.resource_paths("Debug") == (
            "Debugger/panel.xib",
            "${BUILT_PRODUCTS_DIR}/Charts/Charts.framework/Model.momd",
            "Charts/icon.png",
        )

    def test_select(self, write_plan) -> None:
        workspace = Workspace(write_plan(PLAN))
        assert [t.label for t in workspace.select([])] == ["Pods-App", "Pods-Widget"]
        assert [t.label for t in workspace.select(["Pods-Widget"])] == ["Pods-Widget"]
        with pytest.raises(PlanError, match="unknown aggregate target Pods-Other"):
            workspace.select(["Pods-Other"])

    def test_search_paths(self, write_plan) -> None:
        plan = PLAN + 'CTX.aggregate_target(label="Pods-Tests", components={}, search_paths=["Pods-App"])\n'
        workspace = Workspace(write_plan(plan))
        tests = workspace.find_aggregate_target("Pods-Tests")
        assert tests.search_paths_aggregate_targets == [workspace.find_aggregate_target("Pods-App")]


class TestPlanErrors:
    def test_missing_configure(self, write_plan) -> None:
        with pytest.raises(PlanError, match="never calls CTX.configure"):
            Workspace(write_plan("CTX.manifest()\n"))

    def test_duplicate_component(self, write_plan) -> None:
        plan = PLAN + 'CTX.component_target(name="Charts")\n'
        with pytest.raises(PlanError, match="Charts has already been declared"):
            Workspace(write_plan(plan))

    def test_unknown_component(self, write_plan) -> None:
        plan = PLAN + 'CTX.aggregate_target(label="Pods-X", components={"Debug": ["Missing"]})\n'
        with pytest.raises(PlanError, match="unknown component target Missing"):
            Workspace(write_plan(plan))

    def test_unknown_user_target(self, write_plan) -> None:
        plan = PLAN + 'CTX.aggregate_target(label="Pods-X", components={}, user_targets=["Nope"])\n'
        with pytest.raises(PlanError, match="Nope"):
            Workspace(write_plan(plan))

    def test_embedding_cycle(self, write_plan) -> None:
        plan = PLAN.replace(
            'user_targets=["App"],', 'user_targets=["App"], embedded_in="Pods-Widget",'
        )
        with pytest.raises(PlanError, match="embedded in each other"):
            Workspace(write_plan(plan))

    def test_abstract_aggregate(self, write_plan) -> None:
        plan = PLAN + 'CTX.aggregate_target(label="Pods", components={}, abstract=True)\n'
        with pytest.raises(InvalidTargetDefinitionError):
            Workspace(write_plan(plan))


class TestFileLists:
    def test_output_paths(self) -> None:
        assert resource_output_paths(["a/View.xib", "b/Images.xcassets", "c/More.xcassets", "d/x.png"]) == [
            "${TARGET_BUILD_DIR}/${UNLOCALIZED_RESOURCES_FOLDER_PATH}/View.nib",
            "${TARGET_BUILD_DIR}/${UNLOCALIZED_RESOURCES_FOLDER_PATH}/Assets.car",
            "${TARGET_BUILD_DIR}/${UNLOCALIZED_RESOURCES_FOLDER_PATH}/x.png",
        ]
        assert framework_output_paths(["V/Vendored.framework/"]) == [
            "${TARGET_BUILD_DIR}/${FRAMEWORKS_FOLDER_PATH}/Vendored.framework"
        ]

    def test_writes_per_configuration_lists(self, write_plan) -> None:
        workspace = Workspace(write_plan(PLAN))
        app = workspace.find_aggregate_target("Pods-App")
        write_target_file_lists(app)
        inputs = app.embed_frameworks_script_input_files_path("Debug").read_text().splitlines()
        assert inputs == [
            "${PODS_ROOT}/Target Support Files/Pods-App/Pods-App-frameworks.sh",
            "Vendored/Vendored.framework",
            "Vendored/Crypto.xcframework",
        ]
        outputs = app.embed_frameworks_script_output_files_path("Debug").read_text().splitlines()
        assert outputs == [
            "${TARGET_BUILD_DIR}/${FRAMEWORKS_FOLDER_PATH}/Vendored.framework",
            "${TARGET_BUILD_DIR}/${FRAMEWORKS_FOLDER_PATH}/Crypto.framework",
        ]
        resources = app.copy_resources_script_output_files_path("Release").read_text().splitlines()
        assert resources == [
            "${TARGET_BUILD_DIR}/${UNLOCALIZED_RESOURCES_FOLDER_PATH}/Model.momd",
            "${TARGET_BUILD_DIR}/${UNLOCALIZED_RESOURCES_FOLDER_PATH}/icon.png",
        ]
        assert not app.embed_frameworks_script_input_files_path("Release").exists()


class TestCommandLine:
    def _run(self, monkeypatch, *argv) -> None:
        monkeypatch.setattr(sys, "argv", ["integrator", *argv])
        main()

    def test_artifacts(self, write_plan, monkeypatch, capsys) -> None:
        root = write_plan(PLAN)
        self._run(monkeypatch, "artifacts", "--root", str(root), "Pods-App")
        out = capsys.readouterr().out
        assert "Pods-App:" in out
        assert "    framework: Vendored/Vendored.framework" in out
        assert "    xcframework: Vendored/Crypto.xcframework" in out
        assert "  on-demand resource: Vendored/level1.png" in out
        assert "Pods-Widget:" not in out

    def test_classify(self, write_plan, monkeypatch, capsys) -> None:
        root = write_plan(PLAN)
        self._run(monkeypatch, "classify", "--root", str(root), "Pods-Widget")
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Pods-Widget:",
            "  user targets: Widget",
            "  library: no",
            "  requires host target: yes",
        ]

    def test_paths(self, write_plan, monkeypatch, capsys) -> None:
        root = write_plan(PLAN)
        self._run(monkeypatch, "paths", "--root", str(root), "Pods-App")
        out = capsys.readouterr().out
        assert "  resources script: ${PODS_ROOT}/Target Support Files/Pods-App/Pods-App-resources.sh" in out
        assert "  sandbox root: ${SRCROOT}/Pods" in out
        assert "  Release xcconfig: Pods/Target Support Files/Pods-App/Pods-App.release.xcconfig" in out

    def test_errors_exit_with_status(self, write_plan, monkeypatch, capsys) -> None:
        root = write_plan(PLAN)
        with pytest.raises(SystemExit) as exc_info:
            self._run(monkeypatch, "classify", "--root", str(root), "Pods-Missing")
        assert exc_info.value.code == 1
        assert "unknown aggregate target Pods-Missing" in capsys.readouterr().err


class TestPlanDefaults:
    def test_component_without_optional_specs(self, write_plan) -> None:
        plan = PLAN + 'CTX.component_target(name="Plain", resources=["Plain/a.png"])\n'
        workspace = Workspace(write_plan(plan))
        plain = workspace.component_targets["Plain"]
        assert plain.library_spec_names == ["Plain"]
        assert [spec.name for spec in plain.specs] == ["Plain"]
