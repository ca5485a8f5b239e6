"""jellyqueue - resolves catalog items into playback queues."""
