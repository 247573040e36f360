from enum import IntEnum


class IndustryGroup(IntEnum):
    """The industry group of a NAME (3 bit)"""
    Global = 0
    OnHighway = 1
    AgriculturalAndForestry = 2
    Construction = 3
    Marine = 4
    Industrial = 5


class DeviceClass(IntEnum):
    """Device classes (vehicle systems) that select a function code context"""
    NonSpecific = 0
    Tractor = 1


class Function(IntEnum):
    """Industry independent function codes, see ISO 11783-1.

    Codes from 128 on depend on the industry group and device class of the NAME
    and are resolved with :func:`lookup_function`.
    """
    Engine = 0
    AuxiliaryPowerUnit = 1
    ElectricPropulsionControl = 2
    Transmission = 3
    BatteryPackMonitor = 4
    ShiftControl = 5
    PowerTakeOffRearOrPrimary = 6
    SteeringAxle = 7
    DrivingAxle = 8
    SystemControlBrakes = 9
    SteerAxleControlBrakes = 10
    DriveAxleControlBrakes = 11
    EngineRetarder = 12
    DrivelineRetarder = 13
    CruiseControl = 14
    FuelSystem = 15
    SteeringControl = 16
    SteerAxleSuspensionControl = 17
    DriveAxleSuspensionControl = 18
    InstrumentCluster = 19
    TripRecorder = 20
    CabClimateControl = 21
    AerodynamicControl = 22
    VehicleNavigation = 23
    VehicleSecurity = 24
    NetworkInterconnectUnit = 25
    BodyControl = 26
    PowerTakeOffFrontOrSecondary = 27
    OffVehicleGateway = 28
    VirtualTerminal = 29            # ISO 11783-6
    ManagementComputerOne = 30
    PropulsionBatteryCharger = 31
    HeadwayControl = 32
    SystemMonitor = 33
    HydraulicPumpControl = 34
    SystemControlSuspension = 35
    SystemControlPneumatic = 36
    CabController = 37
    TirePressureControl = 38
    IgnitionControl = 39
    SeatControl = 40
    OperatorControlsLighting = 41
    WaterPumpControl = 42
    TransmissionDisplay = 43
    ExhaustEmissionControl = 44
    VehicleDynamicStabilityControl = 45
    OilSystemMonitor = 46
    InformationSystemControl = 47
    RampControl = 48
    ClutchConverterControl = 49
    AuxiliaryHeater = 50
    ForwardLookingCollisionWarningSystem = 51
    ChassisControl = 52
    AlternatorElectricalChargingSystem = 53
    CommunicationsCellular = 54
    CommunicationsSatellite = 55
    CommunicationsRadio = 56
    OperatorControlsSteeringColumn = 57
    FanDriveControl = 58
    Starter = 59
    CabDisplayCab = 60
    FileServerOrPrinter = 61
    OnboardDiagnosticUnit = 62      # may not support all of ISO 11783-12
    EngineValveController = 63
    EnduranceBraking = 64
    GasFlowMeasurement = 65
    IOController = 66
    ElectricalSystemController = 67
    AftertreatmentSystemGasMeasurement = 68
    EngineEmissionAftertreatmentSystem = 69
    AuxiliaryRegenerationDevice = 70
    TransferCaseControl = 71
    CoolantValveController = 72
    RolloverDetectionControl = 73
    LubricationSystem = 74
    SupplementalFan = 75
    TemperatureSensor = 76
    FuelPropertiesSensor = 77
    FireSuppressionSystem = 78
    PowerSystemsManager = 79
    ElectricPowertrain = 80
    HydraulicPowertrain = 81
    FileServer = 82
    Printer = 83
    StartAidDevice = 84
    EngineInjectionControlModule = 85
    EVCommunicationController = 86
    DriverImpairmentDevice = 87
    ElectricPowerConverter = 88
    SupplyEquipmentCommunicationController = 89
    VehicleAdapterCommunicationController = 90

    MaxFunctionCode = 255


class GlobalNonSpecificFunction(IntEnum):
    """Global industry group, non-specific device class"""
    Reserved = 128
    OffBoardDiagnosticServiceTool = 129
    OnBoardDiagnosticDataLogger = 130
    PCKeyboard = 131
    SafetyRestraintSystem = 132
    Turbocharger = 133
    GroundBasedSpeedSensor = 134
    Keypad = 135
    HumiditySensor = 136
    ThermalManagementSystemController = 137
    BrakeStrokeAlert = 138
    OnBoardAxleGroupScale = 139
    OnBoardAxleGroupDisplay = 140
    BatteryCharger = 141
    TurbochargerCompressorBypass = 142
    TurbochargerWastegate = 143
    Throttle = 144
    InertialSensor = 145
    FuelActuator = 146
    EngineExhaustGasRecirculation = 147
    EngineExhaustBackpressure = 148
    OnBoardBinWeighingScale = 149
    OnBoardBinWeighingScaleDisplay = 150
    EngineCylinderPressureMonitoringSystem = 151
    ObjectDetection = 152
    ObjectDetectionDisplay = 153
    ObjectDetectionSensor = 154
    PersonnelDetectionDevice = 155


class OnHighwayNonSpecificFunction(IntEnum):
    """On-highway industry group, non-specific device class"""
    Tachograph = 128
    DoorController = 129
    ArticulationTurntableControl = 130
    BodyToVehicleInterfaceControl = 131
    SlopeSensor = 132
    RetarderDisplay = 134
    DifferentialLockController = 135
    LowVoltageDisconnect = 136
    RoadwayInformation = 137
    AutomatedDriving = 138


class OnHighwayTractorFunction(IntEnum):
    """On-highway industry group, tractor device class"""
    ForwardRoadImageProcessing = 128
    FifthWheelSmartSystem = 129
    CatalystFluidSensor = 130
    AdaptiveFrontLightingSystem = 131
    IdleControlSystem = 132
    UserInterfaceSystem = 133


class AgriculturalNonSpecificFunction(IntEnum):
    """Agricultural and forestry industry group, non-specific device class"""
    NonVirtualTerminalDisplay = 128


# (industry group, device class is non-specific) -> function codes >= 128
CONTEXTUAL_FUNCTIONS = {
    (IndustryGroup.Global, True): GlobalNonSpecificFunction,
    (IndustryGroup.OnHighway, True): OnHighwayNonSpecificFunction,
    (IndustryGroup.OnHighway, False): OnHighwayTractorFunction,
    (IndustryGroup.AgriculturalAndForestry, True): AgriculturalNonSpecificFunction,
}

FIRST_CONTEXTUAL_CODE = 128


def is_non_specific_device_class(device_class):
    return device_class == DeviceClass.NonSpecific


def lookup_function(code, industry_group=IndustryGroup.Global, device_class=DeviceClass.NonSpecific):
    """Resolves a function code to its symbolic meaning.

    Codes below 128 mean the same in every industry group. The upper codes are
    looked up in the table of the given industry group and device class.

    :param int code:
        8-bit function code
    :param int industry_group:
        3-bit industry group of the NAME
    :param int device_class:
        7-bit device class (vehicle system) of the NAME

    :return:
        The enum member or None if the code is not allocated in this context.
    """
    if code < FIRST_CONTEXTUAL_CODE:
        try:
            return Function(code)
        except ValueError:
            return None
    if code == Function.MaxFunctionCode:
        return Function.MaxFunctionCode

    table = CONTEXTUAL_FUNCTIONS.get((industry_group, is_non_specific_device_class(device_class)))
    if table is None:
        return None
    try:
        return table(code)
    except ValueError:
        return None


def function_label(code, industry_group=IndustryGroup.Global, device_class=DeviceClass.NonSpecific):
    """Returns the display label of a function code or None if unallocated"""
    function = lookup_function(code, industry_group, device_class)
    return function.name if function is not None else None
