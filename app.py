from flask import Flask, Response, request, jsonify
from flask_cors import CORS
import json
import logging
import os
from dotenv import load_dotenv
from data.questions import LIKERT, is_likert_value
from data.tips import tips_for_growth
from services.quiz import QuizModel, export_filename, utcnow
from services.storage import AnswerStore, JSONStore

load_dotenv()
logging.basicConfig(level=os.getenv('LOG_LEVEL', 'INFO').upper())

logger = logging.getLogger(__name__)


def create_app(store: AnswerStore | None = None) -> Flask:
	app = Flask(__name__, static_url_path='/static', static_folder='static')
	CORS(app)

	# Persistent store
	if store is None:
		store = AnswerStore(JSONStore(os.getenv('QUIZ_STATE_PATH', os.path.join('data', 'state.json'))))

	# The one quiz session this process serves
	quiz = QuizModel.from_persisted(store.read_raw())

	def _state() -> dict:
		return {
			"answers": quiz.answers,
			"answered": quiz.answered_count(),
			"total": quiz.size,
			"score": quiz.score(),
			"max_score": quiz.max_score(),
			"progress": quiz.progress_percent(),
			"complete": quiz.is_complete(),
		}

	def _incomplete():
		return jsonify({"error": "quiz not complete", "answered": quiz.answered_count(), "total": quiz.size}), 409

	@app.get('/health')
	def health():
		return jsonify({
			"status": "ok",
			"answered": quiz.answered_count(),
			"complete": quiz.is_complete(),
		})

	@app.get('/quiz')
	def get_quiz():
		payload = _state()
		payload["questions"] = [{"id": q.id, "prompt": q.prompt} for q in quiz.questions]
		payload["likert"] = [{"value": o.value, "label": o.label} for o in LIKERT]
		return jsonify(payload)

	@app.post('/answers')
	def set_answer():
		payload = request.get_json(silent=True)
		if payload is None:
			payload = {}
		if not isinstance(payload, dict):
			return jsonify({"error": "expected a JSON object"}), 400
		index = payload.get('index')
		value = payload.get('value')
		if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < quiz.size:
			return jsonify({"error": f"index must be an integer in [0, {quiz.size})"}), 400
		if not is_likert_value(value):
			return jsonify({"error": "value must be an integer from 1 to 5"}), 400
		quiz.set_answer(index, value)
		store.write_raw(quiz.to_persisted())
		return jsonify(_state())

	@app.post('/reset')
	def reset():
		quiz.reset()
		store.write_raw(quiz.to_persisted())
		logger.info("quiz reset")
		return jsonify(_state())

	@app.get('/result')
	def result():
		if not quiz.is_complete():
			return _incomplete()
		return jsonify({
			"score": quiz.score(),
			"max_score": quiz.max_score(),
			"profile": quiz.profile().snapshot(),
			"tips": [{"title": t.title, "description": t.description} for t in tips_for_growth()],
		})

	@app.get('/summary')
	def summary():
		if not quiz.is_complete():
			return _incomplete()
		return Response(quiz.to_summary_text(), mimetype='text/plain')

	@app.get('/export')
	def export():
		if not quiz.is_complete():
			return _incomplete()
		now = utcnow()
		body = json.dumps(quiz.to_export_payload(now), ensure_ascii=False, indent=2)
		return Response(
			body,
			mimetype='application/json',
			headers={"Content-Disposition": f'attachment; filename="{export_filename(now)}"'},
		)

	@app.get('/')
	def index():
		return app.send_static_file('index.html')

	return app


app = create_app()

if __name__ == '__main__':
	app.run(host='0.0.0.0', port=int(os.getenv('PORT', '5000')), debug=True)
