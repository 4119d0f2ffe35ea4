"""Remote source detection and bounded previews."""
