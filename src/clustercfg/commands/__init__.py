"""Click plumbing shared by the clustercfg command."""
