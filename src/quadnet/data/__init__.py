from .quadrants import TRAINING_DATA, Point, get_test_data, random_points, sample_training_point
