"""Console front end: command values, dispatch and the interactive menu."""
