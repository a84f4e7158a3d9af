"""A simple computer opponent and a turn handler for it."""