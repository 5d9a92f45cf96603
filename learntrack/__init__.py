"""Learning items tracker with prerequisite graph, status machines and progress tracking."""
