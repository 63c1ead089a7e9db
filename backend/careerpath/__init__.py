"""CareerPath: career goals, milestone roadmaps and skill tracking."""
