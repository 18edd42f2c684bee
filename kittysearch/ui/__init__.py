"""Terminal overlay: key input, result formatting, the panel and the search loop."""