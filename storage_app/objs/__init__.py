"""Live repository and library objects bound to storage backends."""