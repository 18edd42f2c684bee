"""Search engine, pattern compilation and byte buffer loading."""