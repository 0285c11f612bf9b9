"""Manager service: accepts crack requests, distributes them and tracks their status."""