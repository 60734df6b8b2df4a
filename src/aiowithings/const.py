"""Constants for aiowithings."""

from __future__ import annotations

from enum import IntEnum, StrEnum

# Withings API URLs
DEFAULT_API_ENDPOINT = "https://wbsapi.withings.net"

# API paths (relative to the endpoint)
USER_PATH = "/v2/user"
MEASURE_PATH = "/measure"
MEASURE_V2_PATH = "/v2/measure"

# Actions
ACTION_GET_DEVICE = "getdevice"
ACTION_GET_MEAS = "getmeas"
ACTION_GET_ACTIVITY = "getactivity"

# Default headers
DEFAULT_HEADERS = {
    "User-Agent": "aiowithings",
    "Accept": "application/json",
}

# Seconds allowed for a single request
DEFAULT_TIMEOUT = 30.0

# Query date format for the activity endpoint
DATE_FORMAT = "%Y-%m-%d"


class DeviceType(StrEnum):
    """Type of a device registered to the account."""

    SCALE = "Scale"
    BABYPHONE = "Babyphone"
    BLOOD_PRESSURE_MONITOR = "Blood Pressure Monitor"
    ACTIVITY_TRACKER = "Activity Tracker"
    SLEEP_MONITOR = "Sleep Monitor"
    SMART_CONNECTED_THERMOMETER = "Smart Connected Thermometer"


class DeviceModel(StrEnum):
    """Commercial model of a device."""

    WITHINGS_WBS01 = "Withings WBS01"
    WS30 = "WS30"
    KID_SCALE = "Kid Scale"
    SMART_BODY_ANALYZER = "Smart Body Analyzer"
    BODY_PLUS = "Body+"
    BODY_CARDIO = "Body Cardio"
    BOADY = "Boady"
    SMART_BABY_MONITOR = "Smart Baby Monitor"
    WITHINGS_HOME = "Whithings Home"  # sic, as sent by the API
    BLOOD_PRESSURE_MONITOR_V1 = "Withings Blood Pressure Monitor V1"
    BLOOD_PRESSURE_MONITOR_V2 = "Withings Blood Pressure Monitor V2"
    BLOOD_PRESSURE_MONITOR_V3 = "Withings Blood Pressure Monitor V3"
    PULSE = "Pulse"
    ACTIVITE = "Activite"
    ACTIVITE_POP_STEEL = "Activite (Pop, Steel)"
    WITHINGS_GO = "Withings Go"
    ACTIVITE_STEEL_HR = "Activite Steel HR"
    ACTIVITE_STEEL_HR_SPORT_EDITION = "Activite Steel HR Sport Edition"
    PULSE_HR = "Pulse HR"
    AURA_DOCK = "Aura Dock"
    AURA_SENSOR = "Aura Sensor"
    AURA_SENSOR_V2 = "Aura Sensor V2"
    THERMO = "Thermo"


class _CodeEnum(IntEnum):
    """Integer enum that maps unrecognized integer codes to UNKNOWN (0)."""

    @classmethod
    def _missing_(cls, value: object) -> _CodeEnum | None:
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(0)
        return None


class MeasureType(_CodeEnum):
    """Type of a single measure."""

    UNKNOWN = 0
    WEIGHT = 1
    HEIGHT = 4
    FAT_FREE_MASS = 5
    FAT_RATIO = 6
    FAT_MASS_WEIGHT = 8
    DIASTOLIC_BLOOD_PRESSURE = 9
    SYSTOLIC_BLOOD_PRESSURE = 10
    HEART_PULSE = 11
    TEMPERATURE = 12
    SP02 = 54
    BODY_TEMPERATURE = 71
    SKIN_TEMPERATURE = 73
    MUSCLE_MASS = 76
    HYDRATION = 77
    BONE_MASS = 88
    PULSE_WAVE_VELOCITY = 91
    VO2_MAX = 123
    ATRIAL_FIBRILLATION = 130
    QRS_INTERVAL = 135
    PR_INTERVAL = 136
    QT_INTERVAL = 137
    CORRECTED_QT_INTERVAL = 138
    ATRIAL_FIBRILLATION_PPG = 139
    VASCULAR_AGE = 155
    VISCERAL_FAT = 170


class MeasureCategory(_CodeEnum):
    """Whether a measure group is a real measurement or a user objective."""

    UNKNOWN = 0
    REAL = 1
    USER_OBJECTIVE = 2


class ActivityDataField(StrEnum):
    """Aggregate that can be requested from the activity endpoint."""

    STEPS = "steps"
    DISTANCE = "distance"
    ELEVATION = "elevation"
    SOFT = "soft"
    MODERATE = "moderate"
    INTENSE = "intense"
    ACTIVE = "active"
    CALORIES = "calories"
    TOTAL_CALORIES = "totalcalories"
    HR_AVERAGE = "hr_average"
    HR_MIN = "hr_min"
    HR_MAX = "hr_max"
    HR_ZONE_0 = "hr_zone_0"
    HR_ZONE_1 = "hr_zone_1"
    HR_ZONE_2 = "hr_zone_2"
    HR_ZONE_3 = "hr_zone_3"
