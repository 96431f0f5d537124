# Card size in table-local units; recalibrate per device density via config.yaml
CARD_W = 60
CARD_H = 80

# Any overlap strictly above 20% of the smaller rect counts as contact
CONTACT_THRESHOLD = 0.2

# Estimated table layout (entities carry no screen geometry of their own)
LOOSE_ORIGIN_X = 50
LOOSE_Y = 100
LOOSE_SPACING = 80

BUILD_ORIGIN_X = 200
BUILD_Y = 50
BUILD_SPACING = 100
BUILD_WIDTH_FACTOR = 1.5

TEMP_STACK_ORIGIN_X = 200
TEMP_STACK_Y = 200
TEMP_STACK_SPACING = 120
TEMP_STACK_WIDTH_FACTOR = 1.2

# Proximity tolerances around a card's bounds
MEASURED_TOLERANCE = 80
ESTIMATED_TOLERANCE = 100

CONTACT_THRESHOLD_ENV = "CASSINO_CONTACT_THRESHOLD"
