"""
L0 Data — release order and product availability tables.

Pure data. No logic beyond building immutable lookups at import time.

Two tables per platform:

    ADDED_FORWARD   release → products first shipped in that release.
                    They stay installable in every later release.
    VALID_BACKWARD  release → products last shipped in that release
                    (retired or renamed afterwards). They stay
                    installable in every earlier release.

Releases that introduced or retired nothing have no key. R2024a and
later added no products on any platform, and macOSARM only starts at
R2023b, so its forward table is a single full snapshot.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from mpm_wizard.core.models.platform import Platform


def _names(text: str) -> tuple[str, ...]:
    return tuple(text.split())


# Chronological order of every supported release.
RELEASE_ORDER: tuple[str, ...] = (
    "R2017b", "R2018a", "R2018b", "R2019a", "R2019b", "R2020a", "R2020b",
    "R2021a", "R2021b", "R2022a", "R2022b", "R2023a", "R2023b", "R2024a",
    "R2024b", "R2025a", "R2025b",
)

RELEASE_INDEX: Mapping[str, int] = MappingProxyType(
    {release: i for i, release in enumerate(RELEASE_ORDER)}
)

# First release with native Apple silicon builds.
MACOS_ARM_FIRST_RELEASE = "R2023b"

DEFAULT_RELEASE = "R2025b"


# ── Products shared by the x64 platforms at R2017b ──────────────

_BASE_2017B = """
    Aerospace_Blockset Aerospace_Toolbox Antenna_Toolbox Bioinformatics_Toolbox
    Control_System_Toolbox Curve_Fitting_Toolbox DSP_System_Toolbox
    Database_Toolbox Datafeed_Toolbox Econometrics_Toolbox Embedded_Coder
    Financial_Instruments_Toolbox Financial_Toolbox Fixed-Point_Designer
    Fuzzy_Logic_Toolbox Global_Optimization_Toolbox HDL_Coder
    Image_Acquisition_Toolbox Image_Processing_Toolbox Instrument_Control_Toolbox
    MATLAB MATLAB_Coder MATLAB_Compiler MATLAB_Compiler_SDK MATLAB_Production_Server
    MATLAB_Report_Generator Mapping_Toolbox Model_Predictive_Control_Toolbox
    Network_License_Manager Optimization_Toolbox Parallel_Computing_Toolbox
    Partial_Differential_Equation_Toolbox Phased_Array_System_Toolbox
    Polyspace_Bug_Finder Polyspace_Code_Prover Powertrain_Blockset RF_Blockset
    RF_Toolbox Risk_Management_Toolbox Robotics_System_Toolbox Robust_Control_Toolbox
    Signal_Processing_Toolbox SimBiology SimEvents Simscape Simscape_Driveline
    Simscape_Fluids Simscape_Multibody Simulink Simulink_3D_Animation Simulink_Check
    Simulink_Coder Simulink_Control_Design Simulink_Coverage
    Simulink_Design_Optimization Simulink_Design_Verifier Simulink_Report_Generator
    Simulink_Test Stateflow Statistics_and_Machine_Learning_Toolbox
    Symbolic_Math_Toolbox System_Identification_Toolbox Text_Analytics_Toolbox
    Wavelet_Toolbox
"""

_SHARED_2018B = """
    Communications_Toolbox Simscape_Electrical Sensor_Fusion_and_Tracking_Toolbox
    Deep_Learning_Toolbox 5G_Toolbox WLAN_Toolbox LTE_Toolbox
"""

_SHARED_2020A = "Simulink_Compiler Motor_Control_Blockset MATLAB_Web_App_Server Wireless_HDL_Toolbox"


_WINDOWS_ADDED = {
    "R2023b": _names("Simulink_Fault_Analyzer Polyspace_Test"),
    "R2023a": _names("MATLAB_Test C2000_Microcontroller_Blockset"),
    "R2022b": _names("Medical_Imaging_Toolbox Simscape_Battery"),
    "R2022a": _names(
        "Wireless_Testbench Bluetooth_Toolbox DSP_HDL_Toolbox Requirements_Toolbox "
        "Industrial_Communication_Toolbox"
    ),
    "R2021b": _names("Signal_Integrity_Toolbox RF_PCB_Toolbox"),
    "R2021a": _names("Satellite_Communications_Toolbox DDS_Blockset"),
    "R2020b": _names("UAV_Toolbox Radar_Toolbox Lidar_Toolbox Deep_Learning_HDL_Toolbox"),
    "R2020a": _names(_SHARED_2020A),
    "R2019b": _names("ROS_Toolbox Navigation_Toolbox"),
    "R2019a": _names(
        "System_Composer SoC_Blockset SerDes_Toolbox Reinforcement_Learning_Toolbox "
        "Audio_Toolbox Mixed-Signal_Blockset AUTOSAR_Blockset MATLAB_Parallel_Server "
        "Polyspace_Bug_Finder_Server Polyspace_Code_Prover_Server "
        "Automated_Driving_Toolbox Computer_Vision_Toolbox"
    ),
    "R2018b": _names(_SHARED_2018B),
    "R2018a": _names("Predictive_Maintenance_Toolbox Vehicle_Dynamics_Blockset"),
    "R2017b": _names(
        _BASE_2017B
        + " Data_Acquisition_Toolbox GPU_Coder HDL_Verifier Model-Based_Calibration_Toolbox"
        " Simulink_Desktop_Real-Time"
        " Simulink_PLC_Coder Simulink_Real-Time Spreadsheet_Link Vehicle_Network_Toolbox"
        " Vision_HDL_Toolbox"
    ),
}

_LINUX_ADDED = {
    "R2023b": _names("Simulink_Fault_Analyzer Polyspace_Test Simulink_Desktop_Real-Time"),
    "R2023a": _names("MATLAB_Test C2000_Microcontroller_Blockset"),
    "R2022b": _names("Medical_Imaging_Toolbox Simscape_Battery"),
    "R2022a": _names(
        "Wireless_Testbench Simulink_Real-Time Bluetooth_Toolbox DSP_HDL_Toolbox "
        "Requirements_Toolbox Industrial_Communication_Toolbox"
    ),
    "R2021b": _names("Signal_Integrity_Toolbox RF_PCB_Toolbox"),
    "R2021a": _names("Satellite_Communications_Toolbox DDS_Blockset"),
    "R2020b": _names("UAV_Toolbox Radar_Toolbox Lidar_Toolbox Deep_Learning_HDL_Toolbox"),
    "R2020a": _names(_SHARED_2020A),
    "R2019b": _names("ROS_Toolbox Simulink_PLC_Coder Navigation_Toolbox"),
    "R2019a": _names(
        "System_Composer SoC_Blockset SerDes_Toolbox Reinforcement_Learning_Toolbox "
        "Audio_Toolbox Mixed-Signal_Blockset AUTOSAR_Blockset MATLAB_Parallel_Server "
        "Polyspace_Bug_Finder_Server Polyspace_Code_Prover_Server "
        "Automated_Driving_Toolbox Computer_Vision_Toolbox"
    ),
    "R2018b": _names(_SHARED_2018B),
    "R2018a": _names(
        "Predictive_Maintenance_Toolbox Vehicle_Network_Toolbox Vehicle_Dynamics_Blockset"
    ),
    "R2017b": _names(_BASE_2017B + " GPU_Coder HDL_Verifier Vision_HDL_Toolbox"),
}

_MACOS_X64_ADDED = {
    "R2023b": _names("Simulink_Fault_Analyzer Polyspace_Test"),
    "R2023a": _names("MATLAB_Test"),
    "R2022b": _names("Medical_Imaging_Toolbox Simscape_Battery"),
    "R2022a": _names(
        "Bluetooth_Toolbox DSP_HDL_Toolbox Requirements_Toolbox "
        "Industrial_Communication_Toolbox"
    ),
    "R2021b": _names("RF_PCB_Toolbox"),
    "R2021a": _names("Satellite_Communications_Toolbox DDS_Blockset"),
    "R2020b": _names("UAV_Toolbox Radar_Toolbox Lidar_Toolbox"),
    "R2020a": _names(_SHARED_2020A),
    "R2019b": _names("ROS_Toolbox Simulink_PLC_Coder Navigation_Toolbox"),
    "R2019a": _names(
        "System_Composer SerDes_Toolbox Reinforcement_Learning_Toolbox Audio_Toolbox "
        "Mixed-Signal_Blockset AUTOSAR_Blockset Polyspace_Bug_Finder_Server "
        "Polyspace_Code_Prover_Server Automated_Driving_Toolbox Computer_Vision_Toolbox"
    ),
    "R2018b": _names(_SHARED_2018B),
    "R2018a": _names("Predictive_Maintenance_Toolbox Vehicle_Dynamics_Blockset"),
    "R2017b": _names(_BASE_2017B + " Simulink_Desktop_Real-Time"),
}

_MACOS_ARM_ADDED = {
    "R2023b": _names("""
        5G_Toolbox AUTOSAR_Blockset Aerospace_Blockset Aerospace_Toolbox Antenna_Toolbox
        Audio_Toolbox Automated_Driving_Toolbox Bioinformatics_Toolbox Bluetooth_Toolbox
        Communications_Toolbox Computer_Vision_Toolbox Control_System_Toolbox
        Curve_Fitting_Toolbox DDS_Blockset DSP_HDL_Toolbox DSP_System_Toolbox
        Database_Toolbox Datafeed_Toolbox Deep_Learning_Toolbox Econometrics_Toolbox
        Embedded_Coder Financial_Instruments_Toolbox Financial_Toolbox
        Fixed-Point_Designer Fuzzy_Logic_Toolbox Global_Optimization_Toolbox HDL_Coder
        Image_Acquisition_Toolbox Image_Processing_Toolbox
        Industrial_Communication_Toolbox Instrument_Control_Toolbox LTE_Toolbox
        Lidar_Toolbox MATLAB MATLAB_Coder MATLAB_Compiler MATLAB_Compiler_SDK
        MATLAB_Report_Generator MATLAB_Test Mapping_Toolbox Medical_Imaging_Toolbox
        Mixed-Signal_Blockset Model_Predictive_Control_Toolbox Motor_Control_Blockset
        Navigation_Toolbox Network_License_Manager Optimization_Toolbox
        Parallel_Computing_Toolbox Partial_Differential_Equation_Toolbox
        Phased_Array_System_Toolbox Powertrain_Blockset Predictive_Maintenance_Toolbox
        RF_Blockset RF_PCB_Toolbox RF_Toolbox ROS_Toolbox Radar_Toolbox
        Reinforcement_Learning_Toolbox Requirements_Toolbox Risk_Management_Toolbox
        Robotics_System_Toolbox Robust_Control_Toolbox Satellite_Communications_Toolbox
        Sensor_Fusion_and_Tracking_Toolbox SerDes_Toolbox Signal_Processing_Toolbox
        SimBiology SimEvents Simscape Simscape_Battery Simscape_Driveline
        Simscape_Electrical Simscape_Fluids Simscape_Multibody Simulink
        Simulink_3D_Animation Simulink_Check Simulink_Coder Simulink_Compiler
        Simulink_Control_Design Simulink_Coverage Simulink_Design_Optimization
        Simulink_Design_Verifier Simulink_Fault_Analyzer Simulink_PLC_Coder
        Simulink_Report_Generator Simulink_Test Stateflow
        Statistics_and_Machine_Learning_Toolbox Symbolic_Math_Toolbox System_Composer
        System_Identification_Toolbox Text_Analytics_Toolbox UAV_Toolbox
        Vehicle_Dynamics_Blockset WLAN_Toolbox Wavelet_Toolbox Wireless_HDL_Toolbox
    """),
}


# ── Retired / renamed products ──────────────────────────────────

_RETIRED_2018A = """
    Communications_System_Toolbox LTE_System_Toolbox Neural_Network_Toolbox
    Simscape_Electronics Simscape_Power_Systems WLAN_System_Toolbox
"""

_RETIRED_2018B = """
    Audio_System_Toolbox Automated_Driving_System_Toolbox
    Computer_Vision_System_Toolbox MATLAB_Distributed_Computing_Server
"""

_WINDOWS_RETIRED = {
    "R2024b": _names("Filter_Design_HDL_Coder"),
    "R2021b": _names("Simulink_Requirements OPC_Toolbox"),
    "R2020b": _names("Trading_Toolbox"),
    "R2019b": _names("LTE_HDL_Toolbox"),
    "R2018b": _names(_RETIRED_2018B),
    "R2018a": _names(_RETIRED_2018A),
}

_LINUX_RETIRED = {
    "R2024b": _names("Filter_Design_HDL_Coder"),
    "R2021b": _names("Simulink_Requirements"),
    "R2020b": _names("Trading_Toolbox"),
    "R2019b": _names("LTE_HDL_Toolbox"),
    "R2018b": _names(_RETIRED_2018B),
    "R2018a": _names(_RETIRED_2018A),
}

_MACOS_X64_RETIRED = {
    "R2024b": _names("Filter_Design_HDL_Coder"),
    "R2021b": _names("Simulink_Requirements MATLAB_Parallel_Server"),
    "R2020b": _names("Trading_Toolbox"),
    "R2019b": _names("LTE_HDL_Toolbox"),
    "R2018b": _names(_RETIRED_2018B),
    "R2018a": _names(_RETIRED_2018A),
}

_MACOS_ARM_RETIRED = {
    "R2024b": _names("Filter_Design_HDL_Coder"),
}


ADDED_FORWARD: Mapping[Platform, Mapping[str, tuple[str, ...]]] = MappingProxyType({
    Platform.WINDOWS: MappingProxyType(_WINDOWS_ADDED),
    Platform.LINUX: MappingProxyType(_LINUX_ADDED),
    Platform.MACOS_X64: MappingProxyType(_MACOS_X64_ADDED),
    Platform.MACOS_ARM: MappingProxyType(_MACOS_ARM_ADDED),
})

VALID_BACKWARD: Mapping[Platform, Mapping[str, tuple[str, ...]]] = MappingProxyType({
    Platform.WINDOWS: MappingProxyType(_WINDOWS_RETIRED),
    Platform.LINUX: MappingProxyType(_LINUX_RETIRED),
    Platform.MACOS_X64: MappingProxyType(_MACOS_X64_RETIRED),
    Platform.MACOS_ARM: MappingProxyType(_MACOS_ARM_RETIRED),
})


# ── Sentinel bundle ─────────────────────────────────────────────

PARALLEL_KEYWORD = "parallel_products"

# Last release that shipped MATLAB_Distributed_Computing_Server.
PARALLEL_SERVER_RENAME_RELEASE = "R2018b"

PARALLEL_BUNDLE_LEGACY: tuple[str, ...] = (
    "MATLAB", "Parallel_Computing_Toolbox", "MATLAB_Distributed_Computing_Server",
)
PARALLEL_BUNDLE: tuple[str, ...] = (
    "MATLAB", "Parallel_Computing_Toolbox", "MATLAB_Parallel_Server",
)
