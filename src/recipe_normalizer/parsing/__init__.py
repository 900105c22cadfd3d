"""Line-level parsers: segmenter, ingredient tokenizer, instruction cleaner."""
