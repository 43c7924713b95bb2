"""HTTP gateway that transcribes uploaded audio and stores the transcripts."""
