# Lifecycle and inbound event names
EVENT_CONNECT = "connect"
EVENT_DISCONNECT = "disconnect"
EVENT_HI = "hi"
EVENT_DELAY = "delay"
EVENT_LOAD = "load"
EVENT_GET_SQUARE = "get_square"
EVENT_GET_SUM = "get_sum"

# Outbound event names
EVENT_DEMO_CONNECTED = "demo-connected"
EVENT_BOOM = "boom"
EVENT_RESULT = "result"

CONNECTED_MESSAGE = "you are connected!"

# Key of the user name inside the Socket.IO handshake auth payload
AUTH_USER_NAME_KEY = "userName"
SESSION_IDENTITY_KEY = "identity"

MAX_DELAY_MS = 1000
NUM_MIN = -1000
NUM_MAX = 1000
MAX_SUM_NUMS = 10

ERR_MAX_DELAY = f"max delay duration is {MAX_DELAY_MS}"
ERR_NUM_RANGE = f"num must be in range [{NUM_MIN};{NUM_MAX}]"
ERR_NUMS_RANGE = f"nums must be in range [{NUM_MIN};{NUM_MAX}]"
ERR_MAX_SUM_NUMS = f"max {MAX_SUM_NUMS} nums supported"
