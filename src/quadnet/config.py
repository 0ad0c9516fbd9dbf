# Network
INPUT_COUNT = 2      # x and y
OUTPUT_COUNT = 4     # blue, red, green, purple
LEARNING_RATE = 0.1
INIT_POLICY = "zero"

# Driver
TRAINING_ITERATIONS = 10000
CLASSIFY_POINTS = 100
TEST_SAMPLES = 400
TEST_CLUSTER_STD = 0.15
SEED = None
