"""Computer-room reservations for students, teachers and administrators, kept in text files."""