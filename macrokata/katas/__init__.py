"""The ideas behind each exercise, expressed in Python."""