import os
import sys
import json
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Allow running as `python bin/classify_images.py` from the repo root
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from dermacare.services.condition_classifier import skin_condition_classifier
from dermacare.services.feature_synthesizer import synthesize_features
from dermacare.services.result_interpreter import result_interpreter

def classify_all(identifiers, with_features=False):
    output = []
    for identifier in identifiers:
        result = skin_condition_classifier.classify(identifier)
        item = {
            "image_uri": identifier,
            "result": result.model_dump(),
            "accuracy": result_interpreter.get_accuracy_level(result.confidence),
        }
        if with_features:
            item["features"] = synthesize_features(identifier).model_dump()
        output.append(item)
    return output

def main():
    args = sys.argv[1:]
    with_features = "--features" in args
    identifiers = [a for a in args if a != "--features"]

    if not identifiers:
        # One identifier per line on stdin
        identifiers = [line.strip() for line in sys.stdin if line.strip()]

    if not identifiers:
        print("Usage: python bin/classify_images.py [--features] IMAGE_URI [IMAGE_URI ...]")
        sys.exit(1)

    print(json.dumps(classify_all(identifiers, with_features), indent=2))

if __name__ == "__main__":
    main()
