"""Worker service: searches one part of the word space and reports matches."""