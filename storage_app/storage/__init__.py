"""Storage backends, their registry and the file types they report."""