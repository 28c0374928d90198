"""Message identifiers of the earbud protocol."""

ADJUST_SOUND_SYNC = 133
CHECK_THE_FIT_OF_EARBUDS = 157
CHECK_THE_FIT_OF_EARBUDS_RESULT = 158
DEBUG_GET_ALL_DATA = 38
DEBUG_SERIAL_NUMBER = 41
DEBUG_SKU = 34
EQUALIZER = 134
EXTENDED_STATUS_UPDATED = 97
FIND_MY_EARBUDS_START = 160
FIND_MY_EARBUDS_STOP = 161
FOTA_CONTROL = 188
FOTA_DEVICE_INFO_SW_VERSION = 180
FOTA_DOWNLOAD_DATA = 189
FOTA_EMERGENCY = 186
FOTA_OPEN = 187
FOTA_RESULT = 185
FOTA_UPDATE = 190
GAME_MODE = 135
GET_FMM_CONFIG = 173
LOCK_TOUCHPAD = 144
LOG_COREDUMP_COMPLETE = 51
LOG_COREDUMP_DATA = 50
LOG_COREDUMP_DATA_DONE = 56
LOG_COREDUMP_DATA_SIZE = 49
LOG_SESSION_CLOSE = 59
LOG_SESSION_OPEN = 58
LOG_TRACE_COMPLETE = 54
LOG_TRACE_DATA = 53
LOG_TRACE_DATA_DONE = 57
LOG_TRACE_ROLE_SWITCH = 55
LOG_TRACE_START = 52
MANAGER_INFO = 136
MSG_ID_OUTSIDE_DOUBLE_TAP = 149
MUTE_EARBUD = 162
MUTE_EARBUD_STATUS_UPDATED = 163
NOISE_REDUCTION_MODE_UPDATE = 155
PASS_THROUGH = 159
RESET = 80
SAMPLE = 255
SELF_TEST = 171
SET_FMM_CONFIG = 172
SET_IN_BAND_RINGTONE = 138
SET_NOISE_REDUCTION = 152
SET_SEAMLESS_CONNECTION = 175
SET_TOUCHPAD_OPTION = 146
SET_VOICE_WAKE_UP = 151
STATUS_UPDATED = 96
TOUCHPAD_OTHER_OPTION = 147
TOUCH_UPDATED = 145
TOUCHPAD_ACTION = 45
UPDATE_TIME = 167
USAGE_REPORT = 64
VERSION_INFO = 99
VOICE_NOTI_STATUS = 164
VOICE_NOTI_STOP = 165
VOICE_WAKE_UP_EVENT = 154
VOICE_WAKE_UP_LANGUAGE = 153
VOICE_WAKE_UP_LISTENING_STATUS = 156

# Buds+
AMBIENT_MODE_UPDATED = 129
AMBIENT_VOLUME = 132
AMBIENT_WEARING_STATUS_UPDATED = 137
SET_AMBIENT_MODE = 128
EXTRA_HIGH_AMBIENT = 150
SET_SIDETONE = 139