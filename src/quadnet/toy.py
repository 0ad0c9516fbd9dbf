import argparse

import matplotlib.pyplot as plt
import torch
from matplotlib.patches import Rectangle
from sklearn.metrics import accuracy_score, f1_score

from . import config
from .data.quadrants import TRAINING_DATA, get_test_data, random_points, sample_training_point
from .errors import QuadnetError
from .models.classifier import InitPolicy, LinearClassifier
from .models.codec import QUADRANTS

# Quadrant tints, as (x, y) of the lower-left corner and the label that owns it
QUADRANT_TINTS = (
    ((-1, 0), "green"),
    ((0, 0), "purple"),
    ((-1, -1), "blue"),
    ((0, -1), "red"),
)


def make_generator(seed=None):
    gen = torch.Generator()
    if seed is None:
        gen.seed()
    else:
        gen.manual_seed(seed)
    return gen


def train_clf(model, codec=QUADRANTS, data=TRAINING_DATA, iterations=config.TRAINING_ITERATIONS,
              generator=None, verbose=True):
    """One ``learn`` call per iteration on a point drawn with replacement."""
    if verbose:
        print("--- Training Quadrant Classifier ---")
    for _ in range(iterations):
        point = sample_training_point(data, generator=generator)
        model.learn(point.inputs, codec.encode(point.label))
    if verbose:
        print(f"Training complete ({iterations} iterations)")


def classify_points(model, codec=QUADRANTS, n=config.CLASSIFY_POINTS, generator=None):
    points = random_points(n, generator=generator)
    for point in points:
        point.predicted_label = codec.decode(model.predict(point.inputs))
    return points


def evaluate(name, model, points, codec=QUADRANTS, verbose=True):
    """Accuracy and macro F1 of the decoded predictions against ``point.label``."""
    targets = [p.label for p in points]
    preds = [codec.decode(model.predict(p.inputs)) for p in points]

    acc = accuracy_score(targets, preds)
    f1 = f1_score(targets, preds, labels=list(codec.labels), average="macro", zero_division=0)
    if verbose:
        print(f"[{name}] \t Accuracy: {acc:.4f} \t F1 (macro): {f1:.4f}")
    return {"accuracy": acc, "f1": f1}


def plot_points(points, ax, title=None):
    for corner, color in QUADRANT_TINTS:
        ax.add_patch(Rectangle(corner, 1, 1, facecolor=color, alpha=0.2, edgecolor="none"))
    ax.axhline(0, color="black", linewidth=1)
    ax.axvline(0, color="black", linewidth=1)

    if points:
        colors = [p.predicted_label or p.label or "gray" for p in points]
        ax.scatter([p.x for p in points], [p.y for p in points], c=colors, s=25, edgecolor="k")

    ax.set_xlim(-1, 1)
    ax.set_ylim(-1, 1)
    ax.set_aspect("equal")
    if title:
        ax.set_title(title, fontsize=10)
    return ax


def build_parser():
    parser = argparse.ArgumentParser(
        description="Train a single layer network to classify points by quadrant."
    )
    parser.add_argument("--iterations", type=int, default=config.TRAINING_ITERATIONS,
                        help="number of single-sample training steps")
    parser.add_argument("--points", type=int, default=config.CLASSIFY_POINTS,
                        help="number of random points to classify")
    parser.add_argument("--learning-rate", type=float, default=config.LEARNING_RATE)
    parser.add_argument("--init-policy", choices=[p.value for p in InitPolicy],
                        default=config.INIT_POLICY)
    parser.add_argument("--seed", type=int, default=config.SEED)
    parser.add_argument("--test-samples", type=int, default=config.TEST_SAMPLES,
                        help="size of the noisy held-out set (0 to skip)")
    parser.add_argument("--no-plot", action="store_true", help="skip rendering")
    parser.add_argument("--output", default=None,
                        help="save the plot to this file instead of showing it")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.iterations < 0:
        parser.error("--iterations must not be negative")
    if args.points < 0 or args.test_samples < 0:
        parser.error("--points and --test-samples must not be negative")

    gen = make_generator(args.seed)

    # 1. Model
    try:
        model = LinearClassifier(
            input_count=config.INPUT_COUNT,
            output_count=config.OUTPUT_COUNT,
            learning_rate=args.learning_rate,
            init_policy=args.init_policy,
            generator=gen,
        )
    except QuadnetError as e:
        parser.error(str(e))

    # 2. Training phase
    train_clf(model, iterations=args.iterations, generator=gen)
    print(f"Weights: {model.weights.tolist()}")

    # 3. Evaluation
    print("\n=== PERFORMANCE EVALUATION ===")
    evaluate("Training set", model, list(TRAINING_DATA))
    if args.test_samples:
        test_points = get_test_data(n=args.test_samples, cluster_std=config.TEST_CLUSTER_STD,
                                    seed=args.seed)
        evaluate("Noisy test set", model, test_points)

    # 4. Classification phase
    points = classify_points(model, n=args.points, generator=gen)
    counts = {label: sum(p.predicted_label == label for p in points) for label in QUADRANTS}
    print(f"Classified {len(points)} points: {counts}")

    if args.no_plot:
        return

    fig, ax = plt.subplots(figsize=(6, 6))
    plot_points(points, ax, title=f"{args.iterations} iterations, lr={args.learning_rate}")
    plt.tight_layout()
    if args.output:
        fig.savefig(args.output)
        print(f"Saved plot to {args.output}")
    else:
        plt.show()
    plt.close(fig)


if __name__ == "__main__":
    main()
