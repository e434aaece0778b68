"""Line-oriented multi-language static analysis and automatic fixing."""
