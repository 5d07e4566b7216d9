GREETING = "Hello, World!"
VERSION = "2.0.2"

# Listen on all interfaces; not configurable.
HOST = "0.0.0.0"
PORT = 8000
